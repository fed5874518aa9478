"""
ProMovieDB 客户端常量模块

集中定义客户端默认配置、连接池与重连策略、日志格式和错误消息模板
"""

# ========== 日志配置 ==========
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ========== 客户端默认配置 ==========
DEFAULT_BASE_URL = "https://api.promoviedb.com"
DEFAULT_API_VERSION = "v1"
DEFAULT_LANGUAGE = "en"
DEFAULT_CONNECT_TIMEOUT = 30
DEFAULT_READ_TIMEOUT = 30
DEFAULT_WRITE_TIMEOUT = 30

# 环境变量前缀，如 PROMOVIEDB_API_KEY
ENV_PREFIX = "PROMOVIEDB_"

# ========== 传输层配置 ==========
# 连接池配置：保持少量可复用连接
DEFAULT_POOL_CONFIG = {
    "pool_connections": 5,
    "pool_maxsize": 5,
}

# 传输层重连策略：仅在连接失败时重连一次，不对状态码重试，不退避
# read 重试只作用于幂等方法（urllib3 默认 allowed_methods 不含 POST）
DEFAULT_RETRY_CONFIG = {
    "total": 1,
    "connect": 1,
    "read": 1,
    "status": 0,
    "backoff_factor": 0,
    "raise_on_status": False,
    "respect_retry_after_header": False,
}

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "ab-promoviedb/1.0",
}

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# ========== 错误处理 ==========
# 传输层失败（连接拒绝、超时等）没有 HTTP 状态码，统一使用 -1
TRANSPORT_ERROR_STATUS_CODE = -1

DEFAULT_ERROR_MESSAGE_TEMPLATE = "API request failed with status code: {status_code}"

# 错误响应体中携带错误描述的字段
STATUS_MESSAGE_FIELD = "status_message"

AUTHENTICATION_STATUS_CODES = frozenset({401, 403})
RATE_LIMIT_STATUS_CODES = frozenset({429})

# 日志中 api_key 的脱敏占位符
MASKED_VALUE = "***"
