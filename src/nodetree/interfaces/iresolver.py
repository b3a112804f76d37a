"""
节点解析器接口定义
"""
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .inode import ITreeNode


class INodeResolver(ABC):
    """
    节点解析器接口 - 根据编码查找节点

    实现必须是无副作用的纯查找，可以由任意存储支撑。
    节点核心不会缓存解析结果，也不会修改解析得到的父节点。
    """

    @abstractmethod
    def resolve(self, code: Optional[str]) -> Optional['ITreeNode']:
        """
        根据编码解析节点

        Args:
            code: 节点编码，None表示未设置

        Returns:
            对应的节点，不存在时返回None
        """
        pass
