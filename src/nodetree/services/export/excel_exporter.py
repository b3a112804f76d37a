"""
Excel节点导出器
把节点仓库展开为表格：每行一个节点，带路径和各语言的完整标题
"""
import logging
from pathlib import Path
from typing import Dict, List, Any, Optional

import pandas as pd

from .base_exporter import NodeExporter
from ...core.node import NodeRepository, TreeNode
from ...exceptions import CyclicGraphDetected, ExportError

logger = logging.getLogger(__name__)


class ExcelNodeExporter(NodeExporter):
    """
    Excel节点导出器

    配置项：
    - languages: 导出标题的语言列表，默认 ["en"]
    - title_separator: 完整标题分隔符，默认 " / "
    - path_separator: 路径分隔符，默认 "/"
    - short_titles: 是否额外导出短格式完整标题
    - sheet_name: 工作表名称
    """

    def __init__(self, config: Dict = None):
        super().__init__(config)
        self.languages: List[str] = list(self.config.get('languages', ['en']))
        self.title_separator: str = self.config.get('title_separator', ' / ')
        self.path_separator: str = self.config.get('path_separator', '/')
        self.short_titles: bool = self.config.get('short_titles', False)
        self.sheet_name: str = self.config.get('sheet_name', 'nodes')

        # 统计信息
        self.stats = {
            'nodes_exported': 0,
            'render_failures': 0,
        }

    def _validate_config(self):
        languages = self.config.get('languages', ['en'])
        if not languages:
            raise ExportError("至少需要导出一种语言")

    # ============ 抽象方法实现 ============

    def validate_target(self, file_path: str) -> bool:
        """只接受 .xlsx 文件，且父目录必须存在"""
        path = Path(file_path)
        return path.suffix.lower() == '.xlsx' and path.parent.exists()

    def build_rows(self, repository: NodeRepository) -> List[Dict[str, Any]]:
        """按前序遍历顺序生成导出行，不可达节点追加在最后"""
        ordered = repository.traverse("preorder")
        seen = {node.code for node in ordered}
        ordered.extend(node for node in repository.get_all_nodes() if node.code not in seen)

        rows = [self._build_row(node, repository) for node in ordered]
        self.stats['nodes_exported'] = len(rows)
        return rows

    def write(self, rows: List[Dict[str, Any]], file_path: str) -> None:
        df = pd.DataFrame(rows, columns=self.columns())
        try:
            df.to_excel(file_path, sheet_name=self.sheet_name, index=False, engine='openpyxl')
        except (OSError, ValueError) as e:
            raise ExportError(str(e), target=file_path)
        logger.info(f"导出 {len(rows)} 个节点到 {file_path}")

    # ============ 表格构建 ============

    def columns(self) -> List[str]:
        """导出表的列名"""
        columns = ['code', 'parent_code', 'group', 'position', 'path']
        for lang in self.languages:
            columns.append(f'title_{lang}')
            columns.append(f'full_title_{lang}')
            if self.short_titles:
                columns.append(f'short_title_{lang}')
        return columns

    def to_dataframe(self, repository: NodeRepository) -> pd.DataFrame:
        """生成导出用的 DataFrame"""
        return pd.DataFrame(self.build_rows(repository), columns=self.columns())

    def _build_row(self, node: TreeNode, repository: NodeRepository) -> Dict[str, Any]:
        row: Dict[str, Any] = {
            'code': node.code,
            'parent_code': node.parent_code,
            'group': node.group,
            'position': node.position,
            'path': self._safe(node, lambda: node.get_path(repository, self.path_separator)),
        }
        for lang in self.languages:
            row[f'title_{lang}'] = node.get_title(lang)
            row[f'full_title_{lang}'] = self._safe(
                node, lambda: node.get_full_title(lang, repository, self.title_separator)
            )
            if self.short_titles:
                row[f'short_title_{lang}'] = self._safe(
                    node, lambda: node.get_short_full_title(lang, repository, self.title_separator)
                )
        return row

    def _safe(self, node: TreeNode, render) -> Optional[str]:
        """成环的节点无法渲染，记为空值"""
        try:
            return render()
        except CyclicGraphDetected as e:
            self.stats['render_failures'] += 1
            logger.warning(f"节点 {node.code} 的父节点链成环，跳过渲染: {e}")
            return None
