"""
树节点实体模块
定义树节点，每个节点只知道自己的编码和父节点编码，
层级结构通过外部注入的节点解析器按需重建
"""

import logging
from collections import deque
from typing import Optional, Dict, Any, List, Mapping, Set

from ...interfaces import ITreeNode, INodeResolver
from ...config.validator import NodeDataValidator
from ...exceptions import CyclicGraphDetected
from .titles import TitleMap

logger = logging.getLogger(__name__)

DEFAULT_TITLE_SEPARATOR = " / "
DEFAULT_PATH_SEPARATOR = "/"
SHORT_TITLE_MARKER = ".."


def _title_or_code(node: ITreeNode, lang_code: str) -> Optional[str]:
    """指定语言没有标题时退回节点编码"""
    title = node.get_title(lang_code)
    if title is None:
        title = node.code
    return title


class TreeNode(ITreeNode):
    """
    树节点 - 代表层级结构中的一个可寻址实体（分类、页面等）

    每个节点包含：
    1. 身份信息：code, parent_code, group
    2. 树关系：children_codes（只保存编码）, position
    3. 多语言标题：titles

    所有跨层级的操作（完整标题、路径、祖先判断）都显式接收解析器参数，
    节点本身从不保存解析器。
    """

    # 管理该类节点的管理器名称，由具体变体覆盖
    manager_name: Optional[str] = None

    def __init__(
        self,
        code: Optional[str] = None,
        parent_code: Optional[str] = None,
        group: Optional[str] = None,
        position: int = -1,
        children_codes: Optional[List[str]] = None,
        titles: Optional[Mapping[str, str]] = None
    ):
        """
        初始化树节点，不带参数时构造一个空节点

        Args:
            code: 节点唯一编码
            parent_code: 父节点编码，None 或等于 code 表示根节点
            group: 授权分组
            position: 同级排序位置，-1 表示未设置
            children_codes: 子节点编码列表（会被复制）
            titles: 语言编码 -> 标题（会被复制）
        """
        # ========== 身份信息 ==========
        self._code = code
        self._parent_code = parent_code
        self._group = group

        # ========== 树结构关系 ==========
        self._position = position
        self._children_codes: List[str] = list(children_codes) if children_codes else []

        # ========== 多语言标题 ==========
        self._titles = TitleMap(titles)

    # ========== 属性 ==========

    @property
    def code(self) -> Optional[str]:
        return self._code

    @code.setter
    def code(self, value: Optional[str]) -> None:
        self._code = value

    @property
    def parent_code(self) -> Optional[str]:
        return self._parent_code

    @parent_code.setter
    def parent_code(self, value: Optional[str]) -> None:
        self._parent_code = value

    @property
    def group(self) -> Optional[str]:
        """节点所属的授权分组"""
        return self._group

    @group.setter
    def group(self, value: Optional[str]) -> None:
        self._group = value

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        self._position = value

    @property
    def children_codes(self) -> List[str]:
        """子节点编码列表的副本"""
        return list(self._children_codes)

    @children_codes.setter
    def children_codes(self, codes: Optional[List[str]]) -> None:
        self._children_codes = list(codes) if codes else []

    @property
    def titles(self) -> TitleMap:
        return self._titles

    @titles.setter
    def titles(self, titles: Optional[Mapping[str, str]]) -> None:
        """设置标题，键为语言编码"""
        if isinstance(titles, TitleMap):
            titles = titles.to_dict()
        self._titles = TitleMap(titles)

    # ========== 树结构管理 ==========

    def is_root(self) -> bool:
        """没有父节点或父节点编码等于自身编码时为根节点"""
        return self._parent_code is None or self._parent_code == self._code

    def add_child_code(self, code: str) -> None:
        """在最后位置追加子节点编码"""
        self._children_codes.append(code)

    # ========== 标题管理 ==========

    def get_title(self, lang_code: str) -> Optional[str]:
        return self._titles.get(lang_code)

    def set_title(self, lang_code: str, title: str) -> None:
        self._titles.set(lang_code, title)

    def get_full_title(
        self,
        lang_code: str,
        resolver: INodeResolver,
        separator: str = DEFAULT_TITLE_SEPARATOR,
        short_title: bool = False
    ) -> str:
        """
        生成完整标题（面包屑）

        从当前节点向上回溯，把每个祖先的标题（short_title 时为 ".."）
        连同分隔符拼接到前面，直到一个根节点的片段被加入为止。
        某个父节点无法解析时提前结束，返回已拼接的部分。

        Args:
            lang_code: 提取各节点标题的语言编码
            resolver: 节点解析器
            separator: 节点之间的分隔符
            short_title: 是否把祖先标题替换为 ".."

        Returns:
            完整标题

        Raises:
            CyclicGraphDetected: 父节点链成环
        """
        title = _title_or_code(self, lang_code)
        if self.is_root():
            return title

        visited: Set[str] = {self._code}
        parent = self._get_parent(self, resolver)
        while parent is not None:
            self._check_visited(parent, visited, "get_full_title")
            parent_title = SHORT_TITLE_MARKER if short_title else _title_or_code(parent, lang_code)
            title = f"{parent_title}{separator}{title}"
            if parent.is_root():
                return title
            parent = self._get_parent(parent, resolver)
        return title

    def get_short_full_title(
        self,
        lang_code: str,
        resolver: INodeResolver,
        separator: str = DEFAULT_TITLE_SEPARATOR
    ) -> str:
        """完整标题的短格式，祖先标题都替换为 ".." """
        return self.get_full_title(lang_code, resolver, separator, short_title=True)

    # ========== 路径 ==========

    def get_path(
        self,
        resolver: INodeResolver,
        separator: str = DEFAULT_PATH_SEPARATOR,
        add_root: bool = True
    ) -> str:
        """
        获取节点路径，由从根到当前节点的编码组成

        Args:
            resolver: 节点解析器
            separator: 编码之间的分隔符
            add_root: 为 True 时路径以根节点编码开头
        """
        return separator.join(self.get_path_array(resolver, add_root))

    def get_path_array(self, resolver: INodeResolver, add_root: bool = True) -> List[str]:
        """
        获取从根到当前节点的编码列表

        Args:
            resolver: 节点解析器
            add_root: 为 True 时列表以根节点编码开头

        Returns:
            编码列表（根在前）

        Raises:
            CyclicGraphDetected: 父节点链成环
        """
        if self.is_root() and not add_root:
            return []
        path = deque([self._code])
        if self.is_root():
            return list(path)

        visited: Set[str] = {self._code}
        parent = self._get_parent(self, resolver)
        while parent is not None:
            if parent.is_root() and not add_root:
                break
            self._check_visited(parent, visited, "get_path_array")
            path.appendleft(parent.code)
            if parent.is_root():
                break
            parent = self._get_parent(parent, resolver)
        return list(path)

    def is_child_of(self, node_code: str, resolver: INodeResolver) -> bool:
        """
        判断当前节点是否为指定编码的节点或其后代

        父节点缺失、无法解析或解析为同编码节点时返回 False。

        Raises:
            CyclicGraphDetected: 父节点链成环
        """
        visited: Set[str] = set()
        current: ITreeNode = self
        while True:
            if current.code == node_code:
                return True
            visited.add(current.code)
            parent = self._get_parent(current, resolver)
            if parent is None or parent.code == current.code:
                return False
            self._check_visited(parent, visited, "is_child_of")
            current = parent

    def _get_parent(self, node: ITreeNode, resolver: INodeResolver) -> Optional[ITreeNode]:
        parent_code = node.parent_code
        if parent_code is None:
            return None
        parent = resolver.resolve(parent_code)
        if parent is None:
            logger.debug(f"父节点无法解析: {parent_code} (子节点 {node.code})，返回部分结果")
        return parent

    def _check_visited(self, node: ITreeNode, visited: Set[str], operation: str) -> None:
        if node.code in visited:
            logger.error(f"检测到环形父节点链 [{operation}]: 起点={self._code}, 重复={node.code}")
            raise CyclicGraphDetected(
                node_code=self._code,
                repeated_code=node.code,
                operation=operation,
                visited=visited
            )
        visited.add(node.code)

    # ========== 复制 ==========

    def clone(self) -> 'TreeNode':
        """
        生成同一具体类型的独立副本

        标量字段直接复制，子节点列表换成新容器，标题映射深复制。
        变体通过覆盖 _copy_into 追加自己的字段。
        """
        return self._copy_into(type(self)())

    def _copy_into(self, clone: 'TreeNode') -> 'TreeNode':
        clone._code = self._code
        clone._parent_code = self._parent_code
        clone._group = self._group
        clone._position = self._position
        clone._children_codes = list(self._children_codes)
        clone._titles = self._titles.copy()
        return clone

    # ========== 序列化 ==========

    def to_dict(self) -> Dict[str, Any]:
        """
        序列化节点

        Returns:
            可JSON序列化的字典
        """
        return {
            'node_type': type(self).__name__,
            'manager_name': self.manager_name,
            'code': self._code,
            'parent_code': self._parent_code,
            'group': self._group,
            'position': self._position,
            'children_codes': list(self._children_codes),
            'titles': self._titles.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TreeNode':
        """
        反序列化创建节点，输入先经过 NodeDataValidator 校验

        Raises:
            ValidationError: 数据无效
        """
        validated = NodeDataValidator().validate_node_data(data)
        return cls(
            code=validated['code'],
            parent_code=validated.get('parent_code'),
            group=validated.get('group'),
            position=validated.get('position', -1),
            children_codes=validated.get('children_codes'),
            titles=validated.get('titles')
        )

    # ========== 特殊方法 ==========

    def __str__(self) -> str:
        return f"Node: {self._code}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self._code!r}, parent_code={self._parent_code!r})"
