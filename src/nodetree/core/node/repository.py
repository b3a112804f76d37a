"""
节点仓库模块
在内存中按编码管理树节点，并作为节点解析器供遍历操作使用
"""

import logging
from typing import Optional, Dict, Any, List, Set

from .entity import TreeNode
from ...interfaces import INodeResolver
from ...exceptions import NodeNotFoundError, TreeError

logger = logging.getLogger(__name__)


class NodeRepository(INodeResolver):
    """节点仓库，管理节点集合并按编码解析节点"""

    def __init__(self, nodes: Optional[List[TreeNode]] = None):
        """
        初始化节点仓库

        Args:
            nodes: 初始节点列表，按顺序注册
        """
        self._nodes: Dict[str, TreeNode] = {}

        for node in nodes or []:
            self.add_node(node)

    # ========== 解析 ==========

    def resolve(self, code: Optional[str]) -> Optional[TreeNode]:
        """根据编码解析节点，不存在时返回None"""
        if code is None:
            return None
        return self._nodes.get(code)

    def get_node(self, code: str) -> Optional[TreeNode]:
        """根据编码获取节点"""
        return self.resolve(code)

    def require_node(self, code: str) -> TreeNode:
        """根据编码获取节点，不存在时抛出 NodeNotFoundError"""
        node = self.resolve(code)
        if node is None:
            raise NodeNotFoundError(code)
        return node

    @property
    def root(self) -> Optional[TreeNode]:
        """第一个注册的根节点"""
        for node in self._nodes.values():
            if node.is_root():
                return node
        return None

    # ========== 节点管理 ==========

    def add_node(self, node: TreeNode) -> TreeNode:
        """
        注册节点

        父节点已注册且当前节点不是根节点时，把编码追加到父节点的子节点列表中；
        先于当前节点注册的子节点也按注册顺序追加到当前节点的子节点列表中。

        Raises:
            TreeError: 节点没有编码
        """
        if not node.code:
            raise TreeError("无法注册没有编码的节点", code="NODE_CODE_MISSING")

        if node.code in self._nodes:
            return self._nodes[node.code]  # 已存在

        self._nodes[node.code] = node

        if not node.is_root():
            parent = self._nodes.get(node.parent_code)
            if parent is not None and node.code not in parent.children_codes:
                parent.add_child_code(node.code)

        self._link_registered_children(node)

        logger.debug(f"注册节点: {node.code} (父节点: {node.parent_code})")
        return node

    def _link_registered_children(self, node: TreeNode) -> None:
        """把已注册、父节点编码指向 node 的节点补链到 node 的子节点列表"""
        existing = set(node.children_codes)
        for child in self._nodes.values():
            if child is node or child.is_root() or child.parent_code != node.code:
                continue
            if child.code not in existing:
                node.add_child_code(child.code)
                existing.add(child.code)
                logger.debug(f"补链子节点: {child.code} -> {node.code}")

    def get_all_nodes(self) -> List[TreeNode]:
        """获取所有节点"""
        return list(self._nodes.values())

    def get_node_count(self) -> int:
        """获取节点数量"""
        return len(self._nodes)

    def get_children(self, code: str) -> List[TreeNode]:
        """获取子节点（忽略无法解析的编码）"""
        node = self.require_node(code)
        children = []
        for child_code in node.children_codes:
            child = self._nodes.get(child_code)
            if child is not None:
                children.append(child)
        return children

    def find_nodes(self, **criteria) -> List[TreeNode]:
        """
        根据条件查找节点

        Args:
            **criteria: 查找条件，如 group="free", parent_code="root"

        Returns:
            匹配的节点列表
        """
        results = []

        for node in self._nodes.values():
            match = True

            for key, value in criteria.items():
                if not hasattr(node, key):
                    match = False
                    break

                node_value = getattr(node, key)
                if callable(node_value):
                    node_value = node_value()

                if node_value != value:
                    match = False
                    break

            if match:
                results.append(node)

        return results

    # ========== 遍历 ==========

    def traverse(self, order: str = "preorder", start_code: Optional[str] = None) -> List[TreeNode]:
        """
        沿子节点编码遍历树
        每个节点只出现一次，重复或成环的子节点编码被跳过。

        Args:
            order: 遍历顺序，可选 "preorder"（前序）, "postorder"（后序）
            start_code: 起始节点编码，默认为根节点

        Returns:
            节点列表
        """
        if order not in ("preorder", "postorder"):
            raise ValueError(f"不支持的遍历顺序: {order}")

        start = self.require_node(start_code) if start_code else self.root
        if start is None:
            return []

        result: List[TreeNode] = []
        visited: Set[str] = set()
        # (节点, 子节点是否已展开)
        stack = [(start, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                result.append(node)
                continue
            if node.code in visited:
                # 重复的子节点编码或成环的子节点关系只访问一次
                logger.debug(f"跳过已访问节点 [traverse]: {node.code}")
                continue
            visited.add(node.code)

            children = [self._nodes[c] for c in node.children_codes if c in self._nodes]
            if order == "preorder":
                result.append(node)
            else:
                stack.append((node, True))
            for child in reversed(children):
                stack.append((child, False))

        return result

    def get_tree_depth(self) -> int:
        """获取树的最大深度，根节点深度为0"""
        max_depth = 0
        for node in self._nodes.values():
            max_depth = max(max_depth, len(node.get_path_array(self)) - 1)
        return max_depth

    # ========== 序列化 ==========

    def to_dict(self) -> Dict[str, Any]:
        """
        导出所有节点数据

        Returns:
            可JSON序列化的字典
        """
        root = self.root
        return {
            'root_code': root.code if root else None,
            'node_count': self.get_node_count(),
            'nodes': {code: node.to_dict() for code, node in self._nodes.items()},
        }

    def __contains__(self, code: object) -> bool:
        return code in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
