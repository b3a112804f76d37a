"""
节点数据导出
"""

from .base_exporter import NodeExporter
from .excel_exporter import ExcelNodeExporter

__all__ = ['NodeExporter', 'ExcelNodeExporter']
