"""
节点模块 - 树节点、标题映射和节点仓库
"""

from .titles import TitleMap
from .entity import TreeNode
from .page import PageNode
from .repository import NodeRepository

__all__ = ['TitleMap', 'TreeNode', 'PageNode', 'NodeRepository']
