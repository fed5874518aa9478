import dataclasses
import os
import unittest
from unittest import mock

from ab_promoviedb.config import ClientConfig, EnvSettings, build_config, load_config_from_env, normalize_api_version
from ab_promoviedb.constants import DEFAULT_BASE_URL
from ab_promoviedb.exceptions import APIClientValidationError, ConfigurationError


class TestNormalizeApiVersion(unittest.TestCase):
    """测试 normalize_api_version 函数"""

    def test_blank_defaults_to_v1(self):
        """测试空值：None、空字符串、全空白"""
        assert normalize_api_version(None) == "v1"
        assert normalize_api_version("") == "v1"
        assert normalize_api_version("  ") == "v1"

    def test_prefixed_version_lowercased(self):
        """测试已带 v 前缀的版本号"""
        assert normalize_api_version("v1") == "v1"
        assert normalize_api_version("V1") == "v1"
        assert normalize_api_version("V2Beta") == "v2beta"

    def test_missing_prefix_added(self):
        """测试无前缀的版本号"""
        assert normalize_api_version("2") == "v2"
        assert normalize_api_version("beta") == "vbeta"
        assert normalize_api_version(" 3 ") == "v3"


class TestBuildConfig(unittest.TestCase):
    """测试 build_config 和 ClientConfig"""

    def test_defaults(self):
        """测试默认值"""
        config = build_config(api_key="test-api-key")
        assert config.api_key == "test-api-key"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_version == "v1"
        assert config.language == "en"
        assert config.connect_timeout_seconds == 30
        assert config.read_timeout_seconds == 30
        assert config.write_timeout_seconds == 30
        assert config.logging_enabled is False

    def test_missing_api_key(self):
        """测试 api_key 为 None、空字符串、全空白时构建失败"""
        for api_key in (None, "", "   "):
            with self.assertRaises(ConfigurationError) as ctx:
                build_config(api_key=api_key)
            assert "API key is required" in str(ctx.exception)

    def test_missing_base_url(self):
        """测试 base_url 无效时构建失败"""
        for base_url in (None, "", "  \t"):
            with self.assertRaises(ConfigurationError):
                build_config(api_key="key", base_url=base_url)

    def test_configuration_error_is_validation_error(self):
        """测试 ConfigurationError 属于输入验证异常"""
        with self.assertRaises(APIClientValidationError):
            build_config(api_key="")

    def test_version_normalized_on_build(self):
        """测试构建时规范化版本号"""
        assert build_config(api_key="key", api_version="2").api_version == "v2"
        assert build_config(api_key="key", api_version=None).api_version == "v1"
        assert ClientConfig(api_key="key", api_version="V3").api_version == "v3"

    def test_timeouts_not_validated(self):
        """测试超时参数原样透传（包括 0 和负数）"""
        config = build_config(api_key="key", connect_timeout_seconds=0, read_timeout_seconds=-5, language="")
        assert config.connect_timeout_seconds == 0
        assert config.read_timeout_seconds == -5
        assert config.language == ""

    def test_immutable(self):
        """测试配置不可修改"""
        config = build_config(api_key="key")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.api_key = "other"

    def test_replace_revalidates(self):
        """测试 replace 返回新配置并重新校验"""
        config = build_config(api_key="key")
        updated = config.replace(api_version="4", language="fr")
        assert updated.api_version == "v4"
        assert updated.language == "fr"
        assert config.language == "en"
        with self.assertRaises(ConfigurationError):
            config.replace(api_key=" ")

    def test_repr_hides_api_key(self):
        """测试 repr 不泄露 api_key"""
        config = build_config(api_key="super-secret")
        assert "super-secret" not in repr(config)


class TestLoadConfigFromEnv(unittest.TestCase):
    """测试 load_config_from_env 函数"""

    def patch_environ(self, values: dict[str, str]):
        """只保留给定的环境变量"""
        patcher = mock.patch.dict(os.environ, values, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_reads_prefixed_variables(self):
        """测试读取环境变量并转换类型"""
        self.patch_environ(
            {
                "PROMOVIEDB_API_KEY": "env-key",
                "PROMOVIEDB_BASE_URL": "https://example.test",
                "PROMOVIEDB_API_VERSION": "2",
                "PROMOVIEDB_LANGUAGE": "de",
                "PROMOVIEDB_CONNECT_TIMEOUT": "5",
                "PROMOVIEDB_READ_TIMEOUT": "10",
                "PROMOVIEDB_WRITE_TIMEOUT": "15",
                "PROMOVIEDB_LOGGING_ENABLED": "true",
                "OTHER_API_KEY": "ignored",
            }
        )
        config = load_config_from_env()
        assert config.api_key == "env-key"
        assert config.base_url == "https://example.test"
        assert config.api_version == "v2"
        assert config.language == "de"
        assert config.connect_timeout_seconds == 5
        assert config.read_timeout_seconds == 10
        assert config.write_timeout_seconds == 15
        assert config.logging_enabled is True

    def test_unset_variables_use_defaults(self):
        """测试未设置的变量使用默认值"""
        self.patch_environ({"PROMOVIEDB_API_KEY": "env-key"})
        config = load_config_from_env()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.read_timeout_seconds == 30
        assert config.logging_enabled is False

    def test_settings_only_contain_present_fields(self):
        self.patch_environ({"PROMOVIEDB_API_KEY": "k", "PROMOVIEDB_READ_TIMEOUT": "7"})
        assert EnvSettings().to_config_kwargs() == {"api_key": "k", "read_timeout_seconds": 7}

    def test_overrides_win(self):
        """测试显式参数优先于环境变量"""
        self.patch_environ({"PROMOVIEDB_API_KEY": "env-key"})
        config = load_config_from_env(api_key="explicit", language="ja")
        assert config.api_key == "explicit"
        assert config.language == "ja"

    def test_custom_prefix(self):
        """测试自定义前缀"""
        self.patch_environ({"MOVIES_API_KEY": "k", "PROMOVIEDB_API_KEY": "other"})
        config = load_config_from_env(prefix="MOVIES_")
        assert config.api_key == "k"

    def test_missing_key(self):
        """测试环境变量缺少 api_key"""
        self.patch_environ({})
        with self.assertRaises(ConfigurationError):
            load_config_from_env()

    def test_invalid_timeout(self):
        """测试超时不是整数"""
        self.patch_environ({"PROMOVIEDB_API_KEY": "k", "PROMOVIEDB_READ_TIMEOUT": "soon"})
        with self.assertRaises(ConfigurationError):
            load_config_from_env()

    def test_invalid_boolean(self):
        """测试日志开关拼写错误时报错而不是当作 False"""
        self.patch_environ({"PROMOVIEDB_API_KEY": "k", "PROMOVIEDB_LOGGING_ENABLED": "treu"})
        with self.assertRaises(ConfigurationError) as ctx:
            load_config_from_env()
        assert "logging_enabled" in str(ctx.exception)

    def test_boolean_spellings(self):
        """测试常见的布尔取值"""
        for raw, expected in (("1", True), ("yes", True), ("on", True), ("0", False), ("off", False)):
            self.patch_environ({"PROMOVIEDB_API_KEY": "k", "PROMOVIEDB_LOGGING_ENABLED": raw})
            assert load_config_from_env().logging_enabled is expected



if __name__ == "__main__":
    unittest.main()
