"""
响应解码模块

将原始 JSON 响应体解码为调用方指定的结构：
- 目标结构为 pydantic 模型、dict / list 等类型注解
- 多余字段忽略，缺失字段填充为默认值（None）
- 字段类型不匹配时抛出 DecodeError，不做隐式转换（整数可以写入浮点字段）
- 目标结构为 None 时表示调用方不需要响应内容，空响应体合法
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ab_promoviedb.constants import LOG_FORMAT
from ab_promoviedb.exceptions import DecodeError

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def _get_adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


class BaseResponseDecoder(ABC):
    """响应解码器基类"""

    @abstractmethod
    def decode(self, body: str | None, shape: Any = None) -> Any:
        """
        将响应体解码为目标结构
        :param body: 原始响应体
        :param shape: 目标结构，None 表示不需要响应内容
        :return: 解码结果
        """


class JSONResponseDecoder(BaseResponseDecoder):
    """
    基于 pydantic 严格模式的 JSON 解码器

    参数:
        strict: 是否禁止类型隐式转换，默认 True
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def decode(self, body: str | None, shape: Any = None) -> Any:
        """
        执行步骤:
            1. shape 为 None：不关心响应内容，直接返回 None
            2. shape 为 str：原样返回响应体文本
            3. 响应体为空：无法满足非空目标结构，抛出 DecodeError
            4. 使用 TypeAdapter 校验并解码 JSON
        """
        if shape is None:
            return None
        if shape is str:
            return body or ""
        if body is None or not body.strip():
            raise DecodeError(
                f"Empty response body cannot be decoded as {_shape_name(shape)}", body=body, shape=shape
            )

        try:
            return _get_adapter(shape).validate_json(body, strict=self.strict)
        except ValidationError as e:
            logger.error(f"Failed to decode response as {_shape_name(shape)}: {e.error_count()} error(s)")
            raise DecodeError(f"Failed to decode response as {_shape_name(shape)}: {e}", body=body, shape=shape)


_default_decoder = JSONResponseDecoder()


def decode_response(body: str | None, shape: Any = None) -> Any:
    """使用默认解码器解码响应体"""
    return _default_decoder.decode(body, shape)
