from typing import Any

from ab_promoviedb.models import Credits, ImageCollection, MovieDetails
from ab_promoviedb.services.base import BaseService


class MovieService(BaseService):
    """电影相关接口"""

    collection = "np/3/movie"

    def get_details(
        self, movie_id: str | int, language: str | None = None, append_to_response: str | None = None
    ) -> MovieDetails:
        """
        获取电影详情

        参数:
            movie_id: 电影 ID
            language: ISO 639-1 语言代码，默认使用配置语言
            append_to_response: 逗号分隔的附加对象（服务端最多支持 20 个，客户端不校验）
        """
        return self._get(
            self.resource_path(movie_id),
            MovieDetails,
            language=self.resolve_language(language),
            append_to_response=append_to_response,
        )

    def get_videos(
        self, movie_id: str | int, language: str | None = None, include_video_language: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            self.resource_path(movie_id, "videos"),
            language=self.resolve_language(language),
            include_video_language=include_video_language,
        )

    def get_images(
        self, movie_id: str | int, language: str | None = None, include_image_language: str | None = None
    ) -> ImageCollection:
        return self._get(
            self.resource_path(movie_id, "images"),
            ImageCollection,
            language=self.resolve_language(language),
            include_image_language=include_image_language,
        )

    def get_credits(self, movie_id: str | int, language: str | None = None) -> Credits:
        return self._get(self.resource_path(movie_id, "credits"), Credits, language=self.resolve_language(language))

    def get_release_dates(self, movie_id: str | int) -> dict[str, Any]:
        """获取各地区上映日期和分级"""
        return self._get(self.resource_path(movie_id, "release_dates"))
