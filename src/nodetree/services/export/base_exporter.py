"""
节点数据导出器基类
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Any

from ...core.node import NodeRepository
from ...exceptions import ExportError


class NodeExporter(ABC):
    """节点数据导出器抽象基类"""

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        self._validate_config()

    def _validate_config(self):
        """验证配置参数"""
        pass

    @abstractmethod
    def validate_target(self, file_path: str) -> bool:
        """验证导出目标是否可写"""
        pass

    @abstractmethod
    def build_rows(self, repository: NodeRepository) -> List[Dict[str, Any]]:
        """把节点转换为导出行"""
        pass

    @abstractmethod
    def write(self, rows: List[Dict[str, Any]], file_path: str) -> None:
        """写出导出行"""
        pass

    def export(self, repository: NodeRepository, file_path: str) -> int:
        """
        导出的完整流程
        1. 验证目标
        2. 生成导出行
        3. 写出文件

        Returns:
            导出的节点数
        """
        if not self.validate_target(file_path):
            raise ExportError(f"无效的导出目标: {file_path}", target=file_path)

        rows = self.build_rows(repository)
        self.write(rows, file_path)
        return len(rows)
