"""
节点树异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional, Iterable


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 树结构相关异常 ====================
class TreeError(BaseError):
    """树结构错误基类"""
    pass


class NodeError(TreeError):
    """节点操作错误"""
    pass


class NodeNotFoundError(NodeError):
    """节点不存在"""
    def __init__(self, node_code: Optional[str] = None, **kwargs):
        details = {"node_code": node_code} if node_code else {}
        message = "节点不存在"
        if node_code:
            message += f": code={node_code}"
        super().__init__(message, code="NODE_NOT_FOUND", details=details, **kwargs)


class CyclicGraphDetected(NodeError):
    """父节点链出现环路（未经过真正的根节点）"""
    def __init__(
        self,
        node_code: Optional[str],
        repeated_code: Optional[str],
        operation: str,
        visited: Optional[Iterable[str]] = None,
        **kwargs
    ):
        details = {
            "node_code": node_code,
            "repeated_code": repeated_code,
            "operation": operation,
            "visited": list(visited or []),
        }
        super().__init__(
            message=f"检测到环形父节点链 [{operation}]: {node_code} -> ... -> {repeated_code}",
            code="CYCLIC_GRAPH_DETECTED",
            details=details,
            **kwargs
        )


# ==================== 导出相关异常 ====================
class ExportError(BaseError):
    """导出错误"""
    def __init__(self, message: str, target: Optional[str] = None, **kwargs):
        details = {"target": target} if target else {}
        super().__init__(
            message=f"导出失败: {message}",
            code="EXPORT_ERROR",
            details=details,
            **kwargs
        )
