"""
服务基类

各资源服务只负责拼接路径和查询参数，请求执行和错误分类统一交给 HttpClient
"""

from typing import Any

from ab_promoviedb.config import ClientConfig
from ab_promoviedb.http_client import HttpClient
from ab_promoviedb.url_builder import QueryValue, UrlBuilder, build_versioned_url, quote_path_segment

# 未指定目标结构的接口解码为普通字典
JSONObject = dict[str, Any]


class BaseService:
    """
    资源服务基类

    类属性:
        collection: 资源集合路径，如 "np/3/movie"，供 resource_path 拼接单个资源路径

    参数:
        http_client: 客户端共享的请求管道
        config: 客户端配置
    """

    collection: str = ""

    def __init__(self, http_client: HttpClient, config: ClientConfig):
        self.http_client = http_client
        self.config = config

    def build_url(self, path: str) -> str:
        """
        拼接带版本号的接口地址

        example: base_url="https://api.promoviedb.com", api_version="v1", path="np/3/movie/550"
        结果: "https://api.promoviedb.com/v1/np/3/movie/550"
        """
        return build_versioned_url(self.config.base_url, self.config.api_version, path)

    def resource_path(self, resource_id: str | int, *segments: str) -> str:
        """
        拼接单个资源的相对路径，资源 ID 编码为单个路径段

        example: collection="np/3/movie", resource_id=550, segments=("credits",)
        结果: "np/3/movie/550/credits"
        """
        return "/".join([self.collection, quote_path_segment(resource_id), *segments])

    def url_builder(self, path: str) -> UrlBuilder:
        """创建已附带 api_key 的 UrlBuilder"""
        return UrlBuilder.create(self.build_url(path)).add_param("api_key", self.config.api_key)

    def resolve_language(self, language: str | None) -> str:
        """调用方未指定语言时使用配置中的默认语言"""
        return language if language is not None else self.config.language

    def _get(self, path: str, shape: Any = JSONObject, **params: QueryValue) -> Any:
        """拼接 URL、执行 GET 请求并解码响应"""
        url = self.url_builder(path).add_params(params).build()
        body = self.http_client.get(url)
        return self.http_client.parse_response(body, shape)
