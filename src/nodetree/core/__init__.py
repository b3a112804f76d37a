"""
核心模块包
包含树节点、标题映射、节点仓库等核心实现
"""

# 导入节点模块
from .node import TitleMap, TreeNode, PageNode, NodeRepository

__all__ = [
    'TitleMap',
    'TreeNode',
    'PageNode',
    'NodeRepository',
]
