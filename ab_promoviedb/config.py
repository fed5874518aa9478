"""
客户端配置模块

ClientConfig 是不可变的配置对象，通过 build_config / load_config_from_env 创建，
创建时完成必填项校验和 API 版本规范化
"""

import dataclasses
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ab_promoviedb.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_LANGUAGE,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_WRITE_TIMEOUT,
    ENV_PREFIX,
)
from ab_promoviedb.exceptions import ConfigurationError

# EnvSettings 字段名与 ClientConfig 字段名不一致的部分
_SETTINGS_TO_CONFIG = {
    "connect_timeout": "connect_timeout_seconds",
    "read_timeout": "read_timeout_seconds",
    "write_timeout": "write_timeout_seconds",
}


def normalize_api_version(version: str | None) -> str:
    """
    规范化 API 版本号

    example:
    >>> normalize_api_version(None)
    'v1'
    >>> normalize_api_version("  ")
    'v1'
    >>> normalize_api_version("V2")
    'v2'
    >>> normalize_api_version("2")
    'v2'
    >>> normalize_api_version("beta")
    'vbeta'
    """
    if version is None or not version.strip():
        return DEFAULT_API_VERSION
    version = version.strip()
    if version[0] in ("v", "V"):
        return version.lower()
    return f"v{version}".lower()


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


@dataclass(frozen=True, repr=False)
class ClientConfig:
    """
    客户端配置（不可变）

    属性:
        api_key: API 密钥，必填
        base_url: 服务基础 URL，必填
        api_version: 规范化后的版本号，始终为小写且以 "v" 开头
        language: 默认语言，调用方未指定 language 参数时使用
        connect_timeout_seconds: 连接超时（秒）
        read_timeout_seconds: 读取超时（秒）
        write_timeout_seconds: 写入超时（秒），作用于 POST/PUT
        logging_enabled: 是否启用请求埋点日志

    超时和语言不做校验，原样透传给传输层
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    language: str = DEFAULT_LANGUAGE
    connect_timeout_seconds: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout_seconds: int = DEFAULT_READ_TIMEOUT
    write_timeout_seconds: int = DEFAULT_WRITE_TIMEOUT
    logging_enabled: bool = False

    def __post_init__(self):
        if _is_blank(self.api_key):
            raise ConfigurationError("API key is required")
        if _is_blank(self.base_url):
            raise ConfigurationError("Base URL is required")
        # frozen dataclass 只能通过 object.__setattr__ 回写规范化结果
        object.__setattr__(self, "api_version", normalize_api_version(self.api_version))

    def replace(self, **changes: Any) -> "ClientConfig":
        """返回修改了部分字段的新配置，新配置同样经过校验"""
        return dataclasses.replace(self, **changes)

    def __repr__(self):
        # 避免 api_key 出现在日志和异常信息中
        return (
            f"ClientConfig(base_url={self.base_url!r}, api_version={self.api_version!r}, "
            f"language={self.language!r}, logging_enabled={self.logging_enabled})"
        )


def build_config(
    api_key: str | None = None,
    base_url: str | None = DEFAULT_BASE_URL,
    api_version: str | None = DEFAULT_API_VERSION,
    language: str = DEFAULT_LANGUAGE,
    connect_timeout_seconds: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout_seconds: int = DEFAULT_READ_TIMEOUT,
    write_timeout_seconds: int = DEFAULT_WRITE_TIMEOUT,
    logging_enabled: bool = False,
) -> ClientConfig:
    """
    创建并校验客户端配置

    参数与 ClientConfig 字段一一对应，除 api_key 外均有默认值

    异常:
        ConfigurationError: api_key 或 base_url 缺失、为空或全为空白字符时抛出
    """
    return ClientConfig(
        api_key=api_key,
        base_url=base_url,
        api_version=api_version,
        language=language,
        connect_timeout_seconds=connect_timeout_seconds,
        read_timeout_seconds=read_timeout_seconds,
        write_timeout_seconds=write_timeout_seconds,
        logging_enabled=logging_enabled,
    )


class EnvSettings(BaseSettings):
    """
    从环境变量读取的客户端配置

    变量名为 前缀 + 字段名（大小写不敏感），如 PROMOVIEDB_API_KEY、PROMOVIEDB_READ_TIMEOUT。
    未设置的字段保持 None，由 build_config 使用默认值
    """

    api_key: str | None = None
    base_url: str | None = None
    api_version: str | None = None
    language: str | None = None
    connect_timeout: int | None = None
    read_timeout: int | None = None
    write_timeout: int | None = None
    logging_enabled: bool | None = None

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    def to_config_kwargs(self) -> dict[str, Any]:
        """转换为 build_config 的关键字参数，只包含环境变量中出现的字段"""
        values = self.model_dump(exclude_none=True)
        return {_SETTINGS_TO_CONFIG.get(name, name): value for name, value in values.items()}


def load_config_from_env(prefix: str = ENV_PREFIX, **overrides: Any) -> ClientConfig:
    """
    从环境变量加载配置

    参数:
        prefix: 环境变量前缀，默认 PROMOVIEDB_
        **overrides: 显式传入的配置项，优先级高于环境变量

    执行步骤:
        1. 通过 EnvSettings 读取并转换 {prefix}API_KEY 等变量
        2. 合并显式传入的配置项
        3. 通过 build_config 完成校验

    异常:
        ConfigurationError: 必填项缺失，或超时、日志开关等取值无法转换时抛出
    """
    try:
        settings = EnvSettings(_env_prefix=prefix)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment configuration: {e}") from e
    values = settings.to_config_kwargs()
    values.update(overrides)
    return build_config(**values)
