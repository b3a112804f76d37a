"""
页面节点 - 带附加授权分组和菜单显示标记的树节点变体
"""

from typing import Optional, Dict, Any, Iterable, Set

from ...config.validator import NodeDataValidator
from .entity import TreeNode


class PageNode(TreeNode):
    """站点页面节点"""

    manager_name = "pageManager"

    def __init__(
        self,
        code: Optional[str] = None,
        parent_code: Optional[str] = None,
        group: Optional[str] = None,
        show_in_menu: bool = True,
        extra_groups: Optional[Iterable[str]] = None,
        **kwargs
    ):
        super().__init__(code=code, parent_code=parent_code, group=group, **kwargs)
        self.show_in_menu = show_in_menu
        self._extra_groups: Set[str] = set(extra_groups) if extra_groups else set()

    @property
    def extra_groups(self) -> Set[str]:
        """除主分组外可访问该页面的分组（副本）"""
        return set(self._extra_groups)

    def add_extra_group(self, group: str) -> None:
        self._extra_groups.add(group)

    def remove_extra_group(self, group: str) -> None:
        self._extra_groups.discard(group)

    def _copy_into(self, clone: 'PageNode') -> 'PageNode':
        super()._copy_into(clone)
        clone.show_in_menu = self.show_in_menu
        clone._extra_groups = set(self._extra_groups)
        return clone

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['show_in_menu'] = self.show_in_menu
        result['extra_groups'] = sorted(self._extra_groups)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PageNode':
        """
        反序列化页面节点

        Raises:
            ValidationError: 数据无效（包括 extra_groups 不是列表）
        """
        node = super().from_dict(data)
        node.show_in_menu = bool(data.get('show_in_menu', True))
        extra_groups = NodeDataValidator().validate_extra_groups(data.get('extra_groups') or [])
        node._extra_groups = set(extra_groups)
        return node
