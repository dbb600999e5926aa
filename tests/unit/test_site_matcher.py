import pytest

from infrastructure.site import HostURLMatcher


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/category/news/",
        "https://EXAMPLE.com/?cat=5",
        "https://www.example.com/news",
        "https://example.com:443/news",
    ],
)
def test_same_site_urls_match(url: str) -> None:
    assert HostURLMatcher("https://example.com/")(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "https://other.org/category/news/",
        "https://sub.example.com/news",
        "http://example.com/news",
        "https://example.com:8443/news",
        "ftp://example.com/news",
        "/category/news/",
        "",
        "http://[::1/news",
    ],
)
def test_other_urls_do_not_match(url: str) -> None:
    assert HostURLMatcher("https://example.com/")(url) is False


def test_home_url_with_path_and_port() -> None:
    matcher = HostURLMatcher("http://localhost:8080/blog")
    assert matcher("http://localhost:8080/blog/category/news")
    assert not matcher("http://localhost/blog/category/news")


def test_relative_home_url_is_rejected() -> None:
    with pytest.raises(ValueError):
        HostURLMatcher("/blog")
