from typing import Any

from ab_promoviedb.models import ImageCollection, PersonDetails
from ab_promoviedb.services.base import BaseService


class PersonService(BaseService):
    """人物相关接口"""

    collection = "np/3/person"

    def get_details(
        self, person_id: str | int, language: str | None = None, append_to_response: str | None = None
    ) -> PersonDetails:
        return self._get(
            self.resource_path(person_id),
            PersonDetails,
            language=self.resolve_language(language),
            append_to_response=append_to_response,
        )

    def get_movie_credits(self, person_id: str | int, language: str | None = None) -> dict[str, Any]:
        return self._get(self.resource_path(person_id, "movie_credits"), language=self.resolve_language(language))

    def get_tv_credits(self, person_id: str | int, language: str | None = None) -> dict[str, Any]:
        return self._get(self.resource_path(person_id, "tv_credits"), language=self.resolve_language(language))

    def get_combined_credits(self, person_id: str | int, language: str | None = None) -> dict[str, Any]:
        return self._get(self.resource_path(person_id, "combined_credits"), language=self.resolve_language(language))

    def get_images(self, person_id: str | int) -> ImageCollection:
        return self._get(self.resource_path(person_id, "images"), ImageCollection)

    def get_changes(
        self,
        person_id: str | int,
        start_date: str | None = None,
        end_date: str | None = None,
        page: int | None = None,
    ) -> dict[str, Any]:
        """
        获取人物信息变更记录

        参数:
            start_date: 起始日期 YYYY-MM-DD
            end_date: 截止日期 YYYY-MM-DD
            page: 页码
        """
        return self._get(self.resource_path(person_id, "changes"), start_date=start_date, end_date=end_date, page=page)
