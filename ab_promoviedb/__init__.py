"""
ProMovieDB 电影/剧集元数据服务客户端

核心组件:
- config: 配置校验与规范化
- url_builder: 查询参数过滤与编码
- http_client: 请求执行与埋点
- classifier: 按状态码分类错误
- decoder: JSON 响应解码
"""

from ab_promoviedb.classifier import classify_error
from ab_promoviedb.client import ProMovieDBClient
from ab_promoviedb.config import ClientConfig, EnvSettings, build_config, load_config_from_env, normalize_api_version
from ab_promoviedb.decoder import BaseResponseDecoder, JSONResponseDecoder, decode_response
from ab_promoviedb.exceptions import (
    APIClientError,
    APIClientValidationError,
    APIError,
    AuthenticationError,
    ClientClosedError,
    ConfigurationError,
    DecodeError,
    ErrorCategory,
    GenericAPIError,
    RateLimitError,
    TransportError,
)
from ab_promoviedb.http_client import BaseRequestInstrumentation, HttpClient, LoggingInstrumentation
from ab_promoviedb.url_builder import UrlBuilder, build_versioned_url

__all__ = [
    "APIClientError",
    "APIClientValidationError",
    "APIError",
    "AuthenticationError",
    "BaseRequestInstrumentation",
    "BaseResponseDecoder",
    "ClientClosedError",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "EnvSettings",
    "ErrorCategory",
    "GenericAPIError",
    "HttpClient",
    "JSONResponseDecoder",
    "LoggingInstrumentation",
    "ProMovieDBClient",
    "RateLimitError",
    "TransportError",
    "UrlBuilder",
    "build_config",
    "build_versioned_url",
    "classify_error",
    "decode_response",
    "load_config_from_env",
    "normalize_api_version",
]
