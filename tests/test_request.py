"""Tests for edgeroute.http.request — frozen Request and URL path parsing."""

import pytest

from edgeroute.http.request import Request


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "https",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [(b"host", b"example.com")],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestRequestPath:
    def test_absolute_url(self) -> None:
        req = Request.build("GET", "https://example.com/v1/articles?page=2")
        assert req.path == "/v1/articles"

    def test_absolute_url_without_path(self) -> None:
        req = Request.build("GET", "https://example.com")
        assert req.path == "/"

    def test_relative_url(self) -> None:
        req = Request.build("GET", "/articles")
        assert req.path == "/articles"

    def test_fragment_excluded(self) -> None:
        req = Request.build("GET", "https://example.com/a#section")
        assert req.path == "/a"

    def test_unparseable_url(self) -> None:
        req = Request.build("GET", "http://[::1/articles")
        assert req.path is None


class TestRequestBuild:
    def test_fields(self) -> None:
        req = Request.build("POST", "https://example.com/", {"Origin": "https://a.com"})
        assert req.method == "POST"
        assert req.url == "https://example.com/"
        assert req.headers.get("origin") == "https://a.com"

    def test_no_headers(self) -> None:
        req = Request.build("GET", "https://example.com/")
        assert len(req.headers) == 0

    def test_frozen(self) -> None:
        req = Request.build("GET", "https://example.com/")
        with pytest.raises(AttributeError):
            req.method = "POST"  # type: ignore[misc]


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        req = Request.from_asgi(_make_scope(method="POST", path="/users", raw_path=b"/users"))
        assert req.method == "POST"
        assert req.url == "https://example.com/users"
        assert req.path == "/users"

    def test_method_case_preserved(self) -> None:
        req = Request.from_asgi(_make_scope(method="options"))
        assert req.method == "options"

    def test_query_string(self) -> None:
        req = Request.from_asgi(_make_scope(path="/search", raw_path=b"/search", query_string=b"q=x"))
        assert req.url == "https://example.com/search?q=x"
        assert req.path == "/search"

    def test_host_falls_back_to_server(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[]))
        assert req.url == "https://localhost:8000/"

    def test_path_without_raw_path(self) -> None:
        scope = _make_scope(path="/a b", raw_path=None)
        req = Request.from_asgi(scope)
        assert req.url == "https://example.com/a%20b"

    def test_root_path_prefixed(self) -> None:
        scope = _make_scope(path="/articles", raw_path=None, root_path="/v1")
        req = Request.from_asgi(scope)
        assert req.path == "/v1/articles"

    def test_headers(self) -> None:
        scope = _make_scope(headers=[(b"host", b"example.com"), (b"origin", b"https://a.com")])
        req = Request.from_asgi(scope)
        assert req.headers["Origin"] == "https://a.com"
