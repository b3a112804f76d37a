"""
节点树 - 基于编码寻址的层级节点
"""

__version__ = "1.0.0"

from .core.node import TitleMap, TreeNode, PageNode, NodeRepository
from .interfaces import ITreeNode, INodeResolver
from .exceptions import CyclicGraphDetected, NodeNotFoundError
from .manager import TreeNodeManager

__all__ = [
    'TitleMap',
    'TreeNode',
    'PageNode',
    'NodeRepository',
    'ITreeNode',
    'INodeResolver',
    'CyclicGraphDetected',
    'NodeNotFoundError',
    'TreeNodeManager',
]
