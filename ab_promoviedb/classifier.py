"""
错误分类模块

根据 HTTP 状态码和响应体生成对应类型的接口错误。分类函数本身不会抛出异常，
响应体无法解析时退化为默认错误消息
"""

import json

from ab_promoviedb.constants import (
    AUTHENTICATION_STATUS_CODES,
    DEFAULT_ERROR_MESSAGE_TEMPLATE,
    RATE_LIMIT_STATUS_CODES,
    STATUS_MESSAGE_FIELD,
)
from ab_promoviedb.exceptions import (
    APIError,
    AuthenticationError,
    ErrorCategory,
    GenericAPIError,
    RateLimitError,
)

_ERROR_CLASSES: dict[ErrorCategory, type[APIError]] = {
    ErrorCategory.AUTHENTICATION: AuthenticationError,
    ErrorCategory.RATE_LIMITED: RateLimitError,
    ErrorCategory.GENERIC: GenericAPIError,
}


def categorize_status(status_code: int) -> ErrorCategory:
    """
    按状态码确定错误分类

    example:
    >>> categorize_status(403)
    <ErrorCategory.AUTHENTICATION: 'authentication'>
    >>> categorize_status(429)
    <ErrorCategory.RATE_LIMITED: 'rate_limited'>
    >>> categorize_status(502)
    <ErrorCategory.GENERIC: 'generic'>
    """
    if status_code in AUTHENTICATION_STATUS_CODES:
        return ErrorCategory.AUTHENTICATION
    if status_code in RATE_LIMIT_STATUS_CODES:
        return ErrorCategory.RATE_LIMITED
    return ErrorCategory.GENERIC


def extract_status_message(raw_body: str | None) -> str | None:
    """
    从错误响应体中提取 status_message 字段

    响应体为空、不是 JSON、不是 JSON 对象，或字段缺失/为空时返回 None
    """
    if not raw_body:
        return None
    try:
        payload = json.loads(raw_body)
    except (ValueError, TypeError):
        return None
    if not isinstance(payload, dict):
        return None

    message = payload.get(STATUS_MESSAGE_FIELD)
    # 数字等标量按文本处理，对象/数组视为无效
    if isinstance(message, bool) or not isinstance(message, (str, int, float)):
        return None
    message = str(message)
    return message if message.strip() else None


def classify_error(status_code: int, raw_body: str | None) -> APIError:
    """
    将非 2xx 响应转换为分类后的接口错误（返回而不抛出）

    参数:
        status_code: HTTP 状态码
        raw_body: 原始响应体

    返回:
        AuthenticationError / RateLimitError / GenericAPIError 实例

    执行步骤:
        1. 尝试从响应体提取 status_message，失败时使用默认消息
        2. 按状态码确定错误分类
        3. 构造对应的异常对象，保留状态码和原始响应体
    """
    message = extract_status_message(raw_body)
    if message is None:
        message = DEFAULT_ERROR_MESSAGE_TEMPLATE.format(status_code=status_code)

    error_class = _ERROR_CLASSES[categorize_status(status_code)]
    return error_class(status_code, message, raw_body)
