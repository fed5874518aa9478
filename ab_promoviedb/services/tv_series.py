from typing import Any

from ab_promoviedb.models import Credits, ImageCollection, TvSeriesDetails
from ab_promoviedb.services.base import BaseService


class TvSeriesService(BaseService):
    """剧集相关接口"""

    collection = "np/3/tv"

    def get_details(
        self, series_id: str | int, language: str | None = None, append_to_response: str | None = None
    ) -> TvSeriesDetails:
        return self._get(
            self.resource_path(series_id),
            TvSeriesDetails,
            language=self.resolve_language(language),
            append_to_response=append_to_response,
        )

    def get_videos(
        self, series_id: str | int, language: str | None = None, include_video_language: str | None = None
    ) -> dict[str, Any]:
        return self._get(
            self.resource_path(series_id, "videos"),
            language=self.resolve_language(language),
            include_video_language=include_video_language,
        )

    def get_images(
        self, series_id: str | int, language: str | None = None, include_image_language: str | None = None
    ) -> ImageCollection:
        return self._get(
            self.resource_path(series_id, "images"),
            ImageCollection,
            language=self.resolve_language(language),
            include_image_language=include_image_language,
        )

    def get_credits(self, series_id: str | int, language: str | None = None) -> Credits:
        """获取最新一季的演职人员"""
        return self._get(self.resource_path(series_id, "credits"), Credits, language=self.resolve_language(language))

    def get_aggregate_credits(self, series_id: str | int, language: str | None = None) -> dict[str, Any]:
        """获取所有季汇总后的演职人员"""
        return self._get(self.resource_path(series_id, "aggregate_credits"), language=self.resolve_language(language))

    def get_content_ratings(self, series_id: str | int) -> dict[str, Any]:
        return self._get(self.resource_path(series_id, "content_ratings"))
