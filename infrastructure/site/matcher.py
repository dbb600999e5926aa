"""Decide whether a URL belongs to the configured site."""

from urllib.parse import urlsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}


def _host_key(url: str) -> tuple[str, int] | None:
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parts.hostname:
        return None

    host = parts.hostname.lower()
    if host.startswith("www."):
        host = host[4:]
    return host, port if port is not None else _DEFAULT_PORTS[scheme]


class HostURLMatcher:
    """
    Callable site matcher: a URL matches when its host and port equal the home URL's.

    The scheme itself is not compared, only the effective port (80 for http,
    443 for https unless given). ``www.`` is ignored on both sides.
    """

    def __init__(self, home_url: str) -> None:
        key = _host_key(home_url)
        if key is None:
            raise ValueError(f"home_url must be an absolute http(s) URL, got {home_url!r}")
        self.home_url = home_url
        self._key = key

    def __call__(self, url: str) -> bool:
        if not isinstance(url, str) or not url:
            return False
        return _host_key(url) == self._key
