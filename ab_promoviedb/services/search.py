from typing import Any

from ab_promoviedb.models import MovieSummary, PagedResponse, TvSeriesSummary
from ab_promoviedb.services.base import BaseService, JSONObject


class SearchService(BaseService):
    """
    搜索接口

    所有搜索方法参数一致:
        query: 搜索关键字（必填）
        language: ISO 639-1 语言代码，默认使用配置语言
        include_adult: 是否包含成人内容（服务端默认 false）
        page: 页码（服务端默认 1，最大 10）
        detail: 是否返回详细结果（服务端默认 true）
        page_size: 每页条数（服务端默认 20）
    """

    def _search(
        self,
        kind: str,
        shape: Any,
        query: str,
        language: str | None,
        include_adult: bool | None,
        page: int | None,
        detail: bool | None,
        page_size: int | None,
    ) -> Any:
        return self._get(
            f"np/3/search/{kind}",
            shape,
            query=query,
            language=self.resolve_language(language),
            include_adult=include_adult,
            page=page,
            detail=detail,
            page_size=page_size,
        )

    def search_movie(
        self,
        query: str,
        language: str | None = None,
        include_adult: bool | None = None,
        page: int | None = None,
        detail: bool | None = None,
        page_size: int | None = None,
    ) -> PagedResponse[MovieSummary]:
        return self._search(
            "movie", PagedResponse[MovieSummary], query, language, include_adult, page, detail, page_size
        )

    def search_tv(
        self,
        query: str,
        language: str | None = None,
        include_adult: bool | None = None,
        page: int | None = None,
        detail: bool | None = None,
        page_size: int | None = None,
    ) -> PagedResponse[TvSeriesSummary]:
        return self._search(
            "tv", PagedResponse[TvSeriesSummary], query, language, include_adult, page, detail, page_size
        )

    def search_person(
        self,
        query: str,
        language: str | None = None,
        include_adult: bool | None = None,
        page: int | None = None,
        detail: bool | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        return self._search("person", JSONObject, query, language, include_adult, page, detail, page_size)

    def search_multi(
        self,
        query: str,
        language: str | None = None,
        include_adult: bool | None = None,
        page: int | None = None,
        detail: bool | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        """同时搜索电影、剧集和人物"""
        return self._search("multi", JSONObject, query, language, include_adult, page, detail, page_size)
