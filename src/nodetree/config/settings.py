"""
节点树配置设置
"""
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field, asdict

from ..exceptions import ConfigError


@dataclass
class TreeSettings:
    """
    节点树配置类
    使用dataclass确保配置的类型安全
    """

    # 日志配置
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    enable_logging: bool = True

    # 渲染配置
    title_separator: str = " / "
    path_separator: str = "/"
    add_root_to_path: bool = True

    # 语言配置
    default_lang: str = "en"
    languages: List[str] = field(default_factory=lambda: ["en"])

    # 树结构配置
    root_code: str = "root"

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()

    def _validate_settings(self):
        """验证配置值"""
        # 验证日志级别
        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )
        self.log_level = self.log_level.upper()

        # 验证分隔符
        for key in ("title_separator", "path_separator"):
            if not getattr(self, key):
                raise ConfigError(message=f"分隔符不能为空: {key}", config_key=key)

        # 验证语言
        if not self.languages:
            raise ConfigError(message="至少需要配置一种语言", config_key="languages")
        if self.default_lang not in self.languages:
            raise ConfigError(
                message=f"默认语言不在语言列表中: {self.default_lang}",
                config_key="default_lang"
            )

        if not self.root_code:
            raise ConfigError(message="根节点编码不能为空", config_key="root_code")

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'TreeSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
