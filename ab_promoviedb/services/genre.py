from typing import Any

from ab_promoviedb.services.base import BaseService


class GenreService(BaseService):
    """类型列表接口"""

    def get_movie_genres(self, language: str | None = None) -> dict[str, Any]:
        return self._get("np/3/genre/movie/list", language=self.resolve_language(language))

    def get_tv_genres(self, language: str | None = None) -> dict[str, Any]:
        return self._get("np/3/genre/tv/list", language=self.resolve_language(language))
