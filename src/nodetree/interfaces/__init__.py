"""
接口定义包
"""

from .inode import ITreeNode
from .iresolver import INodeResolver

__all__ = [
    'ITreeNode',
    'INodeResolver',
]
