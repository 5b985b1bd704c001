import re
from typing import Iterable, Optional
from urllib.parse import quote

import httpx

from ..models.errors import InvalidURLComponents

# Characters that may not appear in a registered host name. Ports belong in
# ``Endpoint.port`` so ``:`` is rejected outside IPv6 literals too.
_INVALID_HOST_CHARS = re.compile(r"[\s\x00-\x1f\x7f/\\?#@:<>{}|^`%\[\]\"]")

MAX_PORT = 65535


def encode_query(items: Iterable[tuple[str, Optional[str]]]) -> str:
    """Encode ordered ``(name, value)`` pairs into a query string.

    A ``None`` value renders as a bare ``name``; an empty string renders as
    ``name=``. Everything except RFC 3986 unreserved characters is
    percent-encoded.

    Raises:
        UnicodeEncodeError: If a name or value cannot be encoded as UTF-8.
    """
    parts = []
    for name, value in items:
        encoded = quote(name, safe="")
        if value is not None:
            encoded = f"{encoded}={quote(value, safe='')}"
        parts.append(encoded)
    return "&".join(parts)


def validate_host(host: str) -> None:
    if not host:
        raise InvalidURLComponents("Host must be a non-empty string", {"host": host})
    if host.startswith("[") and host.endswith("]"):
        # IPv6 literal, validated by httpx
        return
    match = _INVALID_HOST_CHARS.search(host)
    if match:
        raise InvalidURLComponents(
            f"Host {host!r} contains a character that cannot be encoded: {match.group()!r}",
            {"host": host},
        )
    # a single trailing dot (fully qualified name) is allowed
    if "" in host.removesuffix(".").split("."):
        raise InvalidURLComponents(
            f"Host {host!r} contains an empty label", {"host": host}
        )


def validate_port(port: Optional[int]) -> None:
    if port is None:
        return
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidURLComponents(
            f"Port must be an integer, got {port!r}", {"port": port}
        )
    if not 0 <= port <= MAX_PORT:
        raise InvalidURLComponents(
            f"Port {port} is outside the range 0-{MAX_PORT}", {"port": port}
        )


def validate_path(path: str) -> None:
    if path and not path.startswith("/"):
        raise InvalidURLComponents(
            f"Path {path!r} must be empty or begin with '/'", {"path": path}
        )


def make_url(
    scheme: str,
    host: str,
    port: Optional[int],
    path: str,
    query: Iterable[tuple[str, Optional[str]]],
) -> httpx.URL:
    """Assemble a URL from its components or raise ``InvalidURLComponents``.

    httpx drops the scheme's default port, so ``port=443`` on ``https``
    yields a URL whose ``port`` is ``None``.
    """
    validate_host(host)
    validate_port(port)
    validate_path(path)

    query = list(query)
    components = {
        "scheme": scheme,
        "host": host,
        "port": port,
        "path": path,
        "query": query,
    }
    try:
        query_string = encode_query(query)
        return httpx.URL(
            scheme=scheme,
            host=host,
            port=port,
            path=path,
            # b"" would still render a trailing "?"
            query=query_string.encode("ascii") if query_string else None,
        )
    except (httpx.InvalidURL, UnicodeError) as e:
        raise InvalidURLComponents(f"Invalid URL components: {e}", components) from e
