"""
URL 构建模块

UrlBuilder 负责在基础路径上拼接过滤后的查询参数：
- None 值、去除空白后为空的字符串会被丢弃
- 整数和布尔值始终保留，布尔值渲染为 "true" / "false"
- 键和值均使用表单编码（空格编码为 "+"），顺序与添加顺序一致
"""

import re
from urllib.parse import quote, urlencode

from ab_promoviedb.constants import MASKED_VALUE

QueryValue = str | int | bool | None


def _render_value(value: QueryValue) -> str | None:
    """
    将参数值转换为查询字符串中的文本，返回 None 表示丢弃该参数

    example:
    >>> _render_value(True)
    'true'
    >>> _render_value(20)
    '20'
    >>> _render_value("   ") is None
    True
    """
    if value is None:
        return None
    # bool 是 int 的子类，必须先判断
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    value = str(value)
    if not value.strip():
        return None
    return value


class UrlBuilder:
    """
    查询参数累加器

    使用示例:
        url = (
            UrlBuilder.create("https://api.promoviedb.com/v1/np/3/search/movie")
            .add_param("api_key", "xxx")
            .add_param("query", "star wars")
            .add_param("page", 2)
            .build()
        )
    """

    def __init__(self, base: str):
        self.base = base
        self._params: list[tuple[str, str]] = []

    @classmethod
    def create(cls, base: str) -> "UrlBuilder":
        return cls(base)

    def add_param(self, key: str, value: QueryValue) -> "UrlBuilder":
        """添加查询参数，不满足保留条件的值直接忽略"""
        rendered = _render_value(value)
        if rendered is not None:
            self._params.append((key, rendered))
        return self

    def add_params(self, params: dict[str, QueryValue]) -> "UrlBuilder":
        """按字典顺序批量添加查询参数"""
        for key, value in params.items():
            self.add_param(key, value)
        return self

    @property
    def params(self) -> list[tuple[str, str]]:
        return list(self._params)

    def build(self) -> str:
        """生成完整 URL，没有参数时原样返回基础路径（不带 "?"）"""
        if not self._params:
            return self.base
        return f"{self.base}?{urlencode(self._params)}"


def build_versioned_url(base_url: str, api_version: str, path: str) -> str:
    """
    拼接带版本号的接口地址

    example:
    >>> build_versioned_url("https://api.promoviedb.com", "v1", "/np/3/movie/550")
    'https://api.promoviedb.com/v1/np/3/movie/550'
    >>> build_versioned_url("https://api.promoviedb.com/", "v2", "np/3/genre/tv/list")
    'https://api.promoviedb.com/v2/np/3/genre/tv/list'
    """
    if not base_url.endswith("/"):
        base_url += "/"
    if path.startswith("/"):
        path = path[1:]
    return f"{base_url}{api_version}/{path}"


def mask_query_param(url: str, key: str = "api_key", placeholder: str = MASKED_VALUE) -> str:
    """
    将 URL 中指定查询参数的值替换为占位符，用于日志输出

    example:
    >>> mask_query_param("https://h/v1/x?api_key=secret&page=1")
    'https://h/v1/x?api_key=***&page=1'
    """
    return re.sub(rf"([?&]{re.escape(key)}=)[^&#]*", lambda m: f"{m.group(1)}{placeholder}", url)


def quote_path_segment(value: str | int) -> str:
    """
    将资源 ID 编码为单个路径段，"/"、"?"、"#" 等字符不会改变 URL 结构

    example:
    >>> quote_path_segment(550)
    '550'
    >>> quote_path_segment("a/b?c")
    'a%2Fb%3Fc'
    """
    return quote(str(value), safe="")
