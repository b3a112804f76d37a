"""
节点接口定义
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any, Mapping

from .iresolver import INodeResolver


class ITreeNode(ABC):
    """节点接口 - 定义树节点的基本行为"""

    @property
    @abstractmethod
    def code(self) -> Optional[str]:
        """节点唯一编码"""
        pass

    @property
    @abstractmethod
    def parent_code(self) -> Optional[str]:
        """父节点编码"""
        pass

    @property
    @abstractmethod
    def group(self) -> Optional[str]:
        """授权分组"""
        pass

    @property
    @abstractmethod
    def position(self) -> int:
        """同级排序位置，-1表示未设置"""
        pass

    @property
    @abstractmethod
    def children_codes(self) -> List[str]:
        """子节点编码列表（按插入顺序）"""
        pass

    @property
    @abstractmethod
    def titles(self) -> Mapping[str, str]:
        """语言编码 -> 标题"""
        pass

    @abstractmethod
    def is_root(self) -> bool:
        """是否为根节点"""
        pass

    @abstractmethod
    def add_child_code(self, code: str) -> None:
        """在末尾追加子节点编码"""
        pass

    @abstractmethod
    def get_title(self, lang_code: str) -> Optional[str]:
        """获取指定语言的标题"""
        pass

    @abstractmethod
    def set_title(self, lang_code: str, title: str) -> None:
        """设置指定语言的标题"""
        pass

    @abstractmethod
    def get_full_title(self, lang_code: str, resolver: INodeResolver,
                       separator: str = " / ", short_title: bool = False) -> str:
        """
        获取完整标题（面包屑）

        Args:
            lang_code: 语言编码
            resolver: 节点解析器
            separator: 分隔符
            short_title: 是否用".."代替祖先标题

        Returns:
            从根到当前节点的标题串
        """
        pass

    @abstractmethod
    def get_short_full_title(self, lang_code: str, resolver: INodeResolver,
                             separator: str = " / ") -> str:
        """获取短格式完整标题，祖先标题都用".."代替"""
        pass

    @abstractmethod
    def get_path(self, resolver: INodeResolver, separator: str = "/",
                 add_root: bool = True) -> str:
        """获取由编码组成的节点路径"""
        pass

    @abstractmethod
    def get_path_array(self, resolver: INodeResolver, add_root: bool = True) -> List[str]:
        """获取从根到当前节点的编码列表"""
        pass

    @abstractmethod
    def is_child_of(self, node_code: str, resolver: INodeResolver) -> bool:
        """判断当前节点是否为指定节点（或其后代）"""
        pass

    @abstractmethod
    def clone(self) -> 'ITreeNode':
        """生成同一具体类型的独立副本"""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        pass
