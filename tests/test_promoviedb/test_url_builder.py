import unittest
from urllib.parse import parse_qsl, urlsplit

from ab_promoviedb.url_builder import UrlBuilder, build_versioned_url, mask_query_param, quote_path_segment

BASE = "https://api.promoviedb.com/v1/np/3/search/movie"


class TestUrlBuilder(unittest.TestCase):
    """测试 UrlBuilder"""

    def test_no_params_returns_base(self):
        """测试没有参数时原样返回（不带 ?）"""
        assert UrlBuilder.create(BASE).build() == BASE
        assert UrlBuilder.create(BASE).add_param("query", None).add_param("language", " ").build() == BASE

    def test_scalar_values_included(self):
        """测试字符串、整数、布尔值"""
        url = (
            UrlBuilder.create(BASE)
            .add_param("query", "matrix")
            .add_param("page", 2)
            .add_param("include_adult", False)
            .add_param("detail", True)
            .add_param("page_size", 0)
            .build()
        )
        assert url == f"{BASE}?query=matrix&page=2&include_adult=false&detail=true&page_size=0"

    def test_null_and_blank_excluded(self):
        """测试 None 和空白字符串被丢弃"""
        url = (
            UrlBuilder.create(BASE)
            .add_param("api_key", "k")
            .add_param("language", None)
            .add_param("query", "")
            .add_param("region", "   ")
            .add_param("year", None)
            .build()
        )
        assert url == f"{BASE}?api_key=k"
        for key in ("language", "query", "region", "year"):
            assert f"{key}=" not in url

    def test_insertion_order(self):
        """测试参数顺序与添加顺序一致"""
        url = UrlBuilder.create(BASE).add_param("z", "1").add_param("a", "2").add_param("m", "3").build()
        assert url.endswith("?z=1&a=2&m=3")

    def test_form_encoding(self):
        """测试空格编码为 + 以及保留字符编码"""
        url = UrlBuilder.create(BASE).add_param("query", "star wars & co=1").build()
        assert url == f"{BASE}?query=star+wars+%26+co%3D1"

    def test_key_is_encoded(self):
        """测试键同样被编码"""
        url = UrlBuilder.create(BASE).add_param("a key", "v").build()
        assert url == f"{BASE}?a+key=v"

    def test_round_trip(self):
        """测试解码查询字符串后还原原始键值"""
        values = [
            ("query", "star wars"),
            ("odd&key", "a=b&c=d"),
            ("unicode", "天空之城 café"),
            ("plus", "1+1=2"),
            ("slash", "a/b?c#d"),
            ("padded", "  keep inner  "),
        ]
        builder = UrlBuilder.create(BASE)
        for key, value in values:
            builder.add_param(key, value)
        query = urlsplit(builder.build()).query
        assert parse_qsl(query, keep_blank_values=True) == values

    def test_add_params(self):
        """测试批量添加"""
        url = UrlBuilder.create(BASE).add_params({"query": "x", "page": None, "detail": False}).build()
        assert url == f"{BASE}?query=x&detail=false"

    def test_params_snapshot(self):
        """测试 params 返回渲染后的参数副本"""
        builder = UrlBuilder.create(BASE).add_param("page", 3)
        params = builder.params
        params.append(("x", "y"))
        assert builder.params == [("page", "3")]


class TestBuildVersionedUrl(unittest.TestCase):
    """测试 build_versioned_url 函数"""

    def test_slashes_normalized(self):
        """测试补全和去除斜杠"""
        expected = "https://api.promoviedb.com/v1/np/3/movie/550"
        assert build_versioned_url("https://api.promoviedb.com", "v1", "np/3/movie/550") == expected
        assert build_versioned_url("https://api.promoviedb.com/", "v1", "/np/3/movie/550") == expected

    def test_base_with_path(self):
        """测试基础 URL 自带路径"""
        assert build_versioned_url("http://localhost:8080/proxy", "v2", "x") == "http://localhost:8080/proxy/v2/x"


class TestMaskQueryParam(unittest.TestCase):
    """测试 mask_query_param 函数"""

    def test_masks_api_key(self):
        assert mask_query_param(f"{BASE}?api_key=secret&page=1") == f"{BASE}?api_key=***&page=1"
        assert mask_query_param(f"{BASE}?page=1&api_key=secret") == f"{BASE}?page=1&api_key=***"

    def test_other_params_untouched(self):
        assert mask_query_param(f"{BASE}?my_api_key=x") == f"{BASE}?my_api_key=x"
        assert mask_query_param(BASE) == BASE


class TestQuotePathSegment(unittest.TestCase):
    """测试 quote_path_segment 函数"""

    def test_plain_ids(self):
        assert quote_path_segment(550) == "550"
        assert quote_path_segment("52fe4250c3a36847f80149f3") == "52fe4250c3a36847f80149f3"

    def test_reserved_characters_encoded(self):
        """测试 / ? # 空格等字符被编码"""
        assert quote_path_segment("a/b") == "a%2Fb"
        assert quote_path_segment("x?y#z") == "x%3Fy%23z"
        assert quote_path_segment("a b") == "a%20b"


if __name__ == "__main__":
    unittest.main()
