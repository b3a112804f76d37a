"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from nodetree.core.node import TreeNode, NodeRepository


@pytest.fixture
def three_level_repository():
    """
    三层树：A（根，无父节点） -> B -> C
    标题：A=Home, B=Docs, C=Intro（en）
    """
    root = TreeNode(code="A", titles={"en": "Home", "it": "Casa"})
    docs = TreeNode(code="B", parent_code="A", titles={"en": "Docs"})
    intro = TreeNode(code="C", parent_code="B", titles={"en": "Intro"})
    return NodeRepository([root, docs, intro])


@pytest.fixture
def cyclic_repository():
    """X 的父节点是 Y，Y 的父节点是 X，两者都不是根节点"""
    x = TreeNode(code="X", parent_code="Y", titles={"en": "Ex"})
    y = TreeNode(code="Y", parent_code="X", titles={"en": "Why"})
    return NodeRepository([x, y])
