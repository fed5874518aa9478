"""
ProMovieDB 客户端入口

使用示例:
    with ProMovieDBClient.create(api_key="your-api-key", language="en") as client:
        movie = client.movies.get_details(550)
        results = client.search.search_movie("fight club", page=1)
"""

import logging
import threading
from typing import Any, TypeVar

from ab_promoviedb.config import ClientConfig, build_config
from ab_promoviedb.constants import LOG_FORMAT
from ab_promoviedb.http_client import BaseRequestInstrumentation, HttpClient
from ab_promoviedb.services import (
    BaseService,
    CertificationService,
    CreditService,
    GenreService,
    MovieService,
    PersonService,
    SearchService,
    StatusService,
    TvSeriesService,
)

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

ServiceT = TypeVar("ServiceT", bound=BaseService)


class ProMovieDBClient:
    """
    ProMovieDB 客户端

    持有唯一的配置和请求管道；各资源服务在首次访问时创建并缓存，
    同一客户端上并发的首次访问只会创建一个实例

    参数:
        config: 已校验的客户端配置
        instrumentation: 可选的请求埋点，传给 HttpClient
    """

    http_client_class: type[HttpClient] = HttpClient

    def __init__(
        self,
        config: ClientConfig,
        instrumentation: BaseRequestInstrumentation | type[BaseRequestInstrumentation] | None = None,
    ):
        self._config = config
        self._http_client = self.http_client_class(config, instrumentation=instrumentation)
        self._services: dict[type[BaseService], BaseService] = {}
        self._services_lock = threading.Lock()

    @classmethod
    def create(cls, api_key: str | None = None, **config_kwargs: Any) -> "ProMovieDBClient":
        """
        按关键字参数创建配置和客户端

        异常:
            ConfigurationError: api_key 或 base_url 无效时抛出
        """
        instrumentation = config_kwargs.pop("instrumentation", None)
        return cls(build_config(api_key=api_key, **config_kwargs), instrumentation=instrumentation)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    def _get_service(self, service_class: type[ServiceT]) -> ServiceT:
        """
        获取（必要时创建）资源服务实例

        先无锁读取，未命中时加锁后再次检查，保证只创建一次
        """
        service = self._services.get(service_class)
        if service is not None:
            return service
        with self._services_lock:
            service = self._services.get(service_class)
            if service is None:
                service = service_class(self._http_client, self._config)
                self._services[service_class] = service
                logger.debug(f"Created {service_class.__name__}")
        return service

    @property
    def movies(self) -> MovieService:
        return self._get_service(MovieService)

    @property
    def tv_series(self) -> TvSeriesService:
        return self._get_service(TvSeriesService)

    @property
    def people(self) -> PersonService:
        return self._get_service(PersonService)

    @property
    def search(self) -> SearchService:
        return self._get_service(SearchService)

    @property
    def genres(self) -> GenreService:
        return self._get_service(GenreService)

    @property
    def credits(self) -> CreditService:
        return self._get_service(CreditService)

    @property
    def certifications(self) -> CertificationService:
        return self._get_service(CertificationService)

    @property
    def status(self) -> StatusService:
        return self._get_service(StatusService)

    def close(self) -> None:
        """释放连接池资源，关闭后不能再发起请求"""
        self._http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
