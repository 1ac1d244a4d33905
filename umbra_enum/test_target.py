"""Testes do TargetResolver."""

import pytest

from umbra_enum.enumeration.target import ensure_scheme, resolve
from umbra_enum.errors import InvalidUrl


@pytest.mark.parametrize("raw, expected", [
    ("example.com", "http://example.com"),
    ("10.10.10.10", "http://10.10.10.10"),
    ("http://example.com", "http://example.com"),
    ("https://example.com", "https://example.com"),
    ("HTTPS://example.com", "HTTPS://example.com"),
])
def test_ensure_scheme_only_prefixes_when_missing(raw: str, expected: str) -> None:
    """https:// não recebe um http:// redundante."""
    assert ensure_scheme(raw) == expected


def test_resolve_adds_http_scheme() -> None:
    assert resolve("example.com") == "http://example.com"


def test_resolve_keeps_https_and_path() -> None:
    assert resolve("https://example.com/app/") == "https://example.com/app/"


def test_resolve_accepts_ip_with_port() -> None:
    assert resolve("127.0.0.1:8080") == "http://127.0.0.1:8080"


@pytest.mark.parametrize("raw", ["", "http://", "not a url", "https://exa mple.com"])
def test_resolve_rejects_garbage(raw: str) -> None:
    """URLs não interpretáveis levantam InvalidUrl."""
    with pytest.raises(InvalidUrl) as excinfo:
        resolve(raw)

    assert excinfo.value.raw == raw


@pytest.mark.parametrize("raw, expected", [
    ("http://my_host:8080", "http://my_host:8080"),
    ("dev_box.local", "http://dev_box.local"),
    ("http://example.com/a b", "http://example.com/a%20b"),
])
def test_resolve_accepts_parseable_urls(raw: str, expected: str) -> None:
    """Hosts com "_" (nomes de serviço do docker-compose) e caminhos com espaço são válidos."""
    assert resolve(raw) == expected
