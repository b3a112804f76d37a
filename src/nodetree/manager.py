"""
节点树管理器
组合节点解析器、配置和日志，是节点回调父节点查找的唯一入口
"""

import logging
import os
from typing import Dict, Optional, Any

from .exceptions import NodeNotFoundError, TreeError
from .config.settings import TreeSettings
from .interfaces import INodeResolver
from .core.node import NodeRepository, TreeNode

PACKAGE_LOGGER = "nodetree"


class TreeNodeManager(INodeResolver):
    """
    节点树管理器

    包装任意节点解析器（默认为内存中的 NodeRepository），
    并按配置提供完整标题、路径等渲染用的便捷方法。
    """

    def __init__(
            self,
            resolver: Optional[INodeResolver] = None,
            config: Optional[Dict[str, Any]] = None
    ):
        """
        初始化管理器

        Args:
            resolver: 节点解析器（默认使用 NodeRepository）
            config: 配置字典，见 TreeSettings
        """
        # 加载配置
        self.settings = TreeSettings.from_dict(config) if config else TreeSettings()

        # 初始化日志
        if self.settings.enable_logging:
            self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self._resolver = resolver if resolver is not None else NodeRepository()
        self.logger.info(f"使用节点解析器: {self._resolver.__class__.__name__}")

    def _setup_logging(self):
        """
        配置日志系统

        控制台输出交给 basicConfig（根日志器已有处理器时不生效）；
        日志文件挂在包日志器上，同一文件只挂一次。
        """
        level = getattr(logging, self.settings.log_level)
        logging.basicConfig(
            level=level,
            format=self.settings.log_format,
            handlers=[logging.StreamHandler()]
        )

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(level)
        if not self.settings.log_file:
            return

        log_path = os.path.abspath(self.settings.log_file)
        for handler in package_logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                return

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(self.settings.log_format))
        package_logger.addHandler(file_handler)

    @property
    def resolver(self) -> INodeResolver:
        return self._resolver

    # ========== 节点查找 ==========

    def resolve(self, code: Optional[str]) -> Optional[TreeNode]:
        return self._resolver.resolve(code)

    def get_node(self, code: str) -> Optional[TreeNode]:
        """根据编码获取节点"""
        return self.resolve(code)

    def require_node(self, code: str) -> TreeNode:
        """根据编码获取节点，不存在时抛出 NodeNotFoundError"""
        node = self.resolve(code)
        if node is None:
            self.logger.warning(f"节点不存在: {code}")
            raise NodeNotFoundError(code)
        return node

    def get_root(self) -> Optional[TreeNode]:
        """获取配置中的根节点"""
        return self.resolve(self.settings.root_code)

    def add_node(self, node: TreeNode) -> TreeNode:
        """
        注册节点，仅当包装的解析器是 NodeRepository 时可用

        Raises:
            TreeError: 解析器不支持注册
        """
        if not isinstance(self._resolver, NodeRepository):
            raise TreeError(
                f"解析器不支持注册节点: {self._resolver.__class__.__name__}",
                code="RESOLVER_READ_ONLY"
            )
        return self._resolver.add_node(node)

    # ========== 渲染 ==========

    def get_full_title(
            self,
            code: str,
            lang_code: Optional[str] = None,
            short_title: bool = False
    ) -> str:
        """
        获取节点的完整标题（面包屑）

        Args:
            code: 节点编码
            lang_code: 语言编码，默认取配置中的默认语言
            short_title: 是否使用短格式
        """
        node = self.require_node(code)
        return node.get_full_title(
            lang_code or self.settings.default_lang,
            self,
            separator=self.settings.title_separator,
            short_title=short_title
        )

    def get_full_titles(self, code: str, short_title: bool = False) -> Dict[str, str]:
        """获取节点在所有配置语言下的完整标题"""
        return {
            lang: self.get_full_title(code, lang, short_title)
            for lang in self.settings.languages
        }

    def get_path(
            self,
            code: str,
            separator: Optional[str] = None,
            add_root: Optional[bool] = None
    ) -> str:
        """获取节点路径，未指定的参数取配置默认值"""
        node = self.require_node(code)
        return node.get_path(
            self,
            separator=separator if separator is not None else self.settings.path_separator,
            add_root=add_root if add_root is not None else self.settings.add_root_to_path
        )

    def is_child_of(self, code: str, ancestor_code: str) -> bool:
        """判断节点是否为指定节点或其后代"""
        return self.require_node(code).is_child_of(ancestor_code, self)
