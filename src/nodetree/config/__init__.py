"""
配置包
"""

from .settings import TreeSettings
from .validator import NodeDataValidator

__all__ = ['TreeSettings', 'NodeDataValidator']
