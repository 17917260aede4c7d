import pytest

from seocheck.utils.url import display_hostname, encode_url_component, is_valid_http_url


@pytest.mark.parametrize(
    "url",
    ["https://example.com", "http://example.com/page?q=1", "HTTPS://Example.com/a", "https://example.com:8443/x"],
)
def test_valid_http_urls(url):
    assert is_valid_http_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "",
        "example.com",
        "ftp://example.com",
        "https://",
        "javascript:alert(1)",
        "https://exa mple.com",
        "http://example.com:99999",
        "/relative/path",
    ],
)
def test_invalid_http_urls(url):
    assert not is_valid_http_url(url)


def test_display_hostname_strips_www():
    assert display_hostname("https://www.Example.com/page") == "example.com"
    assert display_hostname("https://blog.example.com/") == "blog.example.com"


def test_encode_url_component_matches_browser_encoding():
    assert encode_url_component("https://example.com/a b?x=1&y=(2)") == "https%3A%2F%2Fexample.com%2Fa%20b%3Fx%3D1%26y%3D(2)"
