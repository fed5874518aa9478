import logging

from ab_promoviedb.constants import LOG_FORMAT
from ab_promoviedb.exceptions import APIClientError
from ab_promoviedb.services.base import BaseService
from ab_promoviedb.url_builder import UrlBuilder

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


class StatusService(BaseService):
    """服务状态检查接口"""

    def ping(self) -> str:
        """探活接口，不需要 api_key，返回原始响应文本"""
        url = UrlBuilder.create(self.build_url("api/openApi/ping/v1")).build()
        return self.http_client.get(url)

    def is_healthy(self) -> bool:
        """服务可访问时返回 True，任何客户端错误均视为不健康"""
        try:
            self.ping()
        except APIClientError as e:
            logger.warning(f"Health check failed: {e}")
            return False
        return True
