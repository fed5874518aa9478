"""
HTTP 请求管道模块

HttpClient 负责执行单个 HTTP 请求：
- 基于 requests.Session 的连接池复用
- 传输层一次性重连（urllib3 Retry），不做退避重试
- 非 2xx 响应交由 classify_error 分类后抛出
- 传输层失败统一转换为状态码为 -1 的 TransportError
- 可插拔的请求埋点（instrumentation），不影响请求结果
"""

import logging
import time
import uuid
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ab_promoviedb.classifier import classify_error
from ab_promoviedb.config import ClientConfig
from ab_promoviedb.constants import (
    DEFAULT_HEADERS,
    DEFAULT_POOL_CONFIG,
    DEFAULT_RETRY_CONFIG,
    JSON_CONTENT_TYPE,
    LOG_FORMAT,
)
from ab_promoviedb.decoder import BaseResponseDecoder, JSONResponseDecoder
from ab_promoviedb.exceptions import (
    APIClientValidationError,
    APIError,
    ClientClosedError,
    TransportError,
)
from ab_promoviedb.url_builder import mask_query_param

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# 携带请求体的方法，使用写入超时
_WRITE_METHODS = frozenset({"POST", "PUT"})


class BaseRequestInstrumentation:
    """
    请求埋点基类

    HttpClient 在每次请求前后调用埋点方法，子类按需覆盖。
    埋点只做观察，抛出的异常会被记录并忽略，不会影响请求结果
    """

    def before_request(self, method: str, url: str) -> None:
        """
        请求发出前调用
        :param method: HTTP 方法
        :param url: 完整请求 URL
        """

    def after_response(self, url: str, elapsed_millis: int, status_code: int) -> None:
        """
        收到响应后调用（传输层失败时不调用）
        :param url: 完整请求 URL
        :param elapsed_millis: 请求耗时（毫秒）
        :param status_code: HTTP 状态码
        """


class LoggingInstrumentation(BaseRequestInstrumentation):
    """以 DEBUG 级别记录请求和响应，URL 中的 api_key 会被脱敏"""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def before_request(self, method: str, url: str) -> None:
        self.log.debug(f"Sending request {method} on {mask_query_param(url)}")

    def after_response(self, url: str, elapsed_millis: int, status_code: int) -> None:
        self.log.debug(
            f"Received response for {mask_query_param(url)} in {elapsed_millis}ms, status code: {status_code}"
        )


class HttpClient:
    """
    请求管道

    类属性:
        retry_config: 传输层重连策略配置字典
        pool_config: 连接池配置字典
        default_headers: 默认请求头
        instrumentation_class: 配置开启日志时使用的埋点类
        response_decoder_class: 响应解码器类

    线程安全:
        配置不可变，连接池可被多个线程同时使用；close() 之后不允许再发起请求
    """

    retry_config: dict[str, Any] = DEFAULT_RETRY_CONFIG
    pool_config: dict[str, Any] = DEFAULT_POOL_CONFIG
    default_headers: dict[str, str] = DEFAULT_HEADERS
    instrumentation_class: type[BaseRequestInstrumentation] = LoggingInstrumentation
    response_decoder_class: type[BaseResponseDecoder] = JSONResponseDecoder

    def __init__(
        self,
        config: ClientConfig,
        instrumentation: BaseRequestInstrumentation | type[BaseRequestInstrumentation] | None = None,
        response_decoder: BaseResponseDecoder | type[BaseResponseDecoder] | None = None,
        retry_config: dict[str, Any] | None = None,
        pool_config: dict[str, Any] | None = None,
    ):
        """
        初始化请求管道

        参数:
            config: 客户端配置
            instrumentation: 埋点类或实例，显式传入时始终启用；
                未传入时仅在 config.logging_enabled 为 True 时使用 instrumentation_class
            response_decoder: 响应解码器类或实例
            retry_config: 重连策略配置（覆盖类级别配置）
            pool_config: 连接池配置（覆盖类级别配置）

        执行步骤:
            1. 合并重连策略和连接池配置
            2. 解析埋点和解码器实例
            3. 创建并配置 requests.Session
        """
        self.config = config
        self.retry_config = {**self.retry_config, **(retry_config or {})}
        self.pool_config = {**self.pool_config, **(pool_config or {})}

        self.instrumentation_instance = self._resolve_instrumentation(instrumentation)
        self.response_decoder_instance = self._resolve_response_decoder(response_decoder)

        self._closed = False
        self.session = self._create_session()

    def _resolve_instrumentation(
        self, instrumentation: BaseRequestInstrumentation | type[BaseRequestInstrumentation] | None
    ) -> BaseRequestInstrumentation | None:
        """
        解析埋点配置，返回埋点实例或 None

        异常:
            APIClientValidationError: 当埋点配置类型无效时抛出
        """
        if instrumentation is None:
            if not self.config.logging_enabled:
                return None
            instrumentation = self.instrumentation_class

        if isinstance(instrumentation, type) and issubclass(instrumentation, BaseRequestInstrumentation):
            return instrumentation()
        elif isinstance(instrumentation, BaseRequestInstrumentation):
            return instrumentation
        else:
            raise APIClientValidationError("instrumentation must be a BaseRequestInstrumentation subclass or instance")

    def _resolve_response_decoder(
        self, response_decoder: BaseResponseDecoder | type[BaseResponseDecoder] | None
    ) -> BaseResponseDecoder:
        source = response_decoder if response_decoder is not None else self.response_decoder_class
        if isinstance(source, type) and issubclass(source, BaseResponseDecoder):
            return source()
        elif isinstance(source, BaseResponseDecoder):
            return source
        else:
            raise APIClientValidationError("response_decoder must be a BaseResponseDecoder subclass or instance")

    def _create_session(self) -> requests.Session:
        """
        创建并配置 requests.Session 对象

        为 HTTP 和 HTTPS 挂载同一个适配器：连接池大小来自 pool_config，
        重连策略来自 retry_config（仅连接级别失败重连一次）
        """
        session = requests.Session()
        session.headers.update(self.default_headers)

        retry_strategy = Retry(**self.retry_config)
        adapter = HTTPAdapter(max_retries=retry_strategy, **self.pool_config)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _timeout_for(self, method: str) -> tuple[float | None, float | None]:
        """
        计算 (连接超时, 读取超时)

        连接建立后 socket 超时同时约束发送和接收，因此写请求取读写超时中的较大者。
        配置不校验超时取值，小于等于 0 的超时视为不限制（None）
        """
        read_timeout = self.config.read_timeout_seconds
        if method in _WRITE_METHODS:
            read_timeout = max(read_timeout, self.config.write_timeout_seconds)
        connect_timeout = self.config.connect_timeout_seconds
        return (
            connect_timeout if connect_timeout > 0 else None,
            read_timeout if read_timeout > 0 else None,
        )

    def _notify(self, hook_name: str, *args) -> None:
        """调用埋点方法，埋点自身的异常只记录不传播"""
        if self.instrumentation_instance is None:
            return
        try:
            getattr(self.instrumentation_instance, hook_name)(*args)
        except Exception as e:
            logger.warning(f"Instrumentation hook {hook_name} failed: {e}")

    @property
    def closed(self) -> bool:
        return self._closed

    def execute(self, method: str, url: str, body: str | None = None) -> str:
        """
        执行单个 HTTP 请求

        参数:
            method: HTTP 方法（GET/POST/PUT/DELETE）
            url: 完整请求 URL（已包含查询参数）
            body: JSON 请求体文本，仅 POST/PUT 使用

        返回:
            2xx 响应的原始响应体文本（空响应返回 ""）

        执行步骤:
            1. 检查客户端是否已关闭
            2. 触发请求前埋点，发起请求
            3. 传输层异常转换为 TransportError
            4. 触发响应后埋点
            5. 非 2xx 响应交给 classify_error 分类后抛出

        异常:
            ClientClosedError: 客户端已关闭
            TransportError: 连接失败、超时等传输层错误（status_code=-1）
            AuthenticationError / RateLimitError / GenericAPIError: 服务端返回非 2xx
        """
        if self._closed:
            raise ClientClosedError("HttpClient is closed; create a new client to issue requests")

        method = method.upper()
        request_id = f"REQ-{uuid.uuid4().hex[:6]}"
        masked_url = mask_query_param(url)

        headers = {}
        data = None
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            data = body.encode("utf-8")

        logger.info(f"[{request_id}] Starting {method} request to {masked_url}")
        self._notify("before_request", method, url)
        start = time.perf_counter()

        try:
            response = self.session.request(
                method=method, url=url, data=data, headers=headers, timeout=self._timeout_for(method)
            )
        except requests.exceptions.RequestException as original_exception:
            if isinstance(original_exception, requests.exceptions.Timeout):
                message = f"Request to {masked_url} timed out: {original_exception}"
            else:
                message = f"Request to {masked_url} failed: {original_exception}"
            converted_exception = TransportError(message)
            logger.error(f"[{request_id}] Request failed: {converted_exception}")
            raise converted_exception from original_exception

        elapsed_millis = int((time.perf_counter() - start) * 1000)
        self._notify("after_response", url, elapsed_millis, response.status_code)
        logger.info(f"[{request_id}] Received {response.status_code} response in {elapsed_millis}ms")
        logger.debug(f"[{request_id}] Response headers: {response.headers}")

        response_body = self._read_body(response)
        if not 200 <= response.status_code < 300:
            error: APIError = classify_error(response.status_code, response_body)
            logger.error(f"[{request_id}] Request failed: {error!r}")
            raise error
        return response_body

    @staticmethod
    def _read_body(response: requests.Response) -> str:
        """读取响应体文本，服务端未声明编码或声明了无法识别的编码时按 UTF-8 解码"""
        if not response.content:
            return ""
        try:
            return response.content.decode(response.encoding or "utf-8", errors="replace")
        except LookupError:
            logger.warning(f"Unknown response encoding {response.encoding!r}, decoding as utf-8")
            return response.content.decode("utf-8", errors="replace")

    def get(self, url: str) -> str:
        """执行 GET 请求"""
        return self.execute("GET", url)

    def post(self, url: str, body: str) -> str:
        """执行 POST 请求，body 为 JSON 文本"""
        return self.execute("POST", url, body)

    def put(self, url: str, body: str) -> str:
        """执行 PUT 请求，body 为 JSON 文本"""
        return self.execute("PUT", url, body)

    def delete(self, url: str) -> str:
        """执行 DELETE 请求"""
        return self.execute("DELETE", url)

    def parse_response(self, body: str | None, shape: Any = None) -> Any:
        """
        使用配置的解码器将响应体解码为目标结构

        异常:
            DecodeError: 响应体无法解码为目标结构
        """
        return self.response_decoder_instance.decode(body, shape)

    def close(self) -> None:
        """
        关闭会话，释放连接池资源

        未发起过请求或重复调用都是安全的
        """
        if self._closed:
            return
        self._closed = True
        self.session.close()
        logger.info("Session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
