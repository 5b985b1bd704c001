from typing import TYPE_CHECKING, Any, List

import httpx

from ._headers import HTTPHeader, MIMEType, compose_headers, has_header
from ._utils._request_spec import RequestSpec
from ._utils._url import make_url
from ._utils.constants import HEADER_ACCEPT

if TYPE_CHECKING:
    from ._endpoint import Endpoint


def build_url(endpoint: "Endpoint[Any]") -> httpx.URL:
    """Combine the endpoint's scheme, host, port, path and query into a URL.

    Raises:
        InvalidURLComponents: If the components cannot form a valid URL.
    """
    return make_url(
        scheme=endpoint.scheme.value,
        host=endpoint.host,
        port=endpoint.port,
        path=endpoint.path,
        query=(item.as_tuple() for item in endpoint.query),
    )


def build_request(endpoint: "Endpoint[Any]") -> RequestSpec:
    """Build the wire-level request for ``endpoint``.

    The body is attached only for POST, PUT and PATCH. Endpoints relying on
    the default JSON decoder get ``Accept: application/json`` unless an
    ``Accept`` header is already present.

    Raises:
        InvalidURLComponents: Propagated from :func:`build_url`.
    """
    url = build_url(endpoint)

    headers: List[HTTPHeader] = list(endpoint.headers)
    if endpoint.uses_default_json_decoder and not has_header(headers, HEADER_ACCEPT):
        headers.insert(0, HTTPHeader.accept(MIMEType.JSON))

    return RequestSpec(
        method=endpoint.method.value,
        url=url,
        headers=compose_headers(headers),
        content=endpoint.method.body,
    )
