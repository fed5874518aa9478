"""
ProMovieDB 客户端异常模块

定义客户端的全部异常类型。接口错误通过 category 字段标记为三类之一：
- AUTHENTICATION: 认证失败（401/403）
- RATE_LIMITED: 触发限流（429）
- GENERIC: 其他非 2xx 响应，以及状态码为 -1 的传输层失败

调用方既可以按异常子类捕获，也可以统一捕获 APIError 后按 category 分派
"""

from enum import Enum

from ab_promoviedb.constants import TRANSPORT_ERROR_STATUS_CODE


class APIClientError(Exception):
    """
    API 客户端异常基类

    所有自定义异常的基类，用于统一捕获和处理客户端相关错误
    """


class APIClientValidationError(APIClientError):
    """
    输入验证异常

    当请求参数、配置等输入数据验证失败时抛出此异常
    """


class ConfigurationError(APIClientValidationError):
    """
    配置异常

    构建客户端配置时发现必填项缺失或为空时抛出，调用方必须修正输入后再创建客户端
    """


class ClientClosedError(APIClientError):
    """客户端关闭后仍发起请求时抛出"""


class ErrorCategory(str, Enum):
    """接口错误分类"""

    AUTHENTICATION = "authentication"
    RATE_LIMITED = "rate_limited"
    GENERIC = "generic"


class APIError(APIClientError):
    """
    接口错误基类

    属性:
        category: 错误分类（ErrorCategory）
        status_code: HTTP 状态码，传输层失败时为 -1
        message: 错误描述，优先取自响应体的 status_message 字段
        raw_body: 原始响应体，传输层失败时为 None
    """

    category: ErrorCategory = ErrorCategory.GENERIC

    def __init__(self, status_code: int, message: str, raw_body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.raw_body = raw_body

    @property
    def is_transport_error(self) -> bool:
        """是否为传输层失败（未收到服务端响应）"""
        return self.status_code == TRANSPORT_ERROR_STATUS_CODE

    def __repr__(self):
        return (
            f"{type(self).__name__}(category={self.category.value}, "
            f"status_code={self.status_code}, message={self.message!r})"
        )


class AuthenticationError(APIError):
    """认证失败：API Key 无效、缺失或权限不足（401/403）"""

    category = ErrorCategory.AUTHENTICATION


class RateLimitError(APIError):
    """请求过于频繁被限流（429），客户端不会自动重试"""

    category = ErrorCategory.RATE_LIMITED


class GenericAPIError(APIError):
    """其他非 2xx 响应"""

    category = ErrorCategory.GENERIC


class TransportError(GenericAPIError):
    """
    传输层异常

    连接失败、DNS 解析失败、超时等未收到服务端响应的情况，状态码固定为 -1，
    原始 requests 异常通过 __cause__ 保留
    """

    def __init__(self, message: str):
        super().__init__(TRANSPORT_ERROR_STATUS_CODE, message, None)


class DecodeError(APIClientError):
    """
    响应解码异常

    响应体不是合法 JSON，或字段类型与目标结构不匹配时抛出

    属性:
        body: 原始响应体
        shape: 目标结构
    """

    def __init__(self, message: str, body: str | None = None, shape=None):
        super().__init__(message)
        self.body = body
        self.shape = shape
