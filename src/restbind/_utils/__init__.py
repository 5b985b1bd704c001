from ._builder import collect
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import get_httpx_client_kwargs
from ._url import encode_query, make_url

__all__ = [
    "collect",
    "encode_query",
    "get_httpx_client_kwargs",
    "make_url",
    "setup_logging",
    "RequestSpec",
]
