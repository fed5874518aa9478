from typing import Any

from ab_promoviedb.services.base import BaseService


class CertificationService(BaseService):
    """分级标准接口"""

    def get_movie_certifications(self) -> dict[str, Any]:
        return self._get("np/3/certification/movie/list")

    def get_tv_certifications(self) -> dict[str, Any]:
        return self._get("np/3/certification/tv/list")
