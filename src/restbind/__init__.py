from ._config import Config
from ._decoders import (
    Decoder,
    ResponseMetadata,
    bytes_decoder,
    json_decoder,
    metadata_decoder,
    text_decoder,
)
from ._endpoint import Endpoint, HTTPMethod, Scheme, Verb
from ._headers import Authorization, HTTPHeader, MIMEType, compose_headers
from ._query import QueryItem
from ._request_builder import build_request, build_url
from ._response_parser import decode_response
from ._services import Session
from ._utils import RequestSpec, collect, setup_logging
from .models import (
    DecodingError,
    InvalidURLComponents,
    LoadResult,
    RestbindError,
    TransportFailure,
)

__all__ = [
    "Authorization",
    "Config",
    "Decoder",
    "DecodingError",
    "Endpoint",
    "HTTPHeader",
    "HTTPMethod",
    "InvalidURLComponents",
    "LoadResult",
    "MIMEType",
    "QueryItem",
    "RequestSpec",
    "ResponseMetadata",
    "RestbindError",
    "Scheme",
    "Session",
    "TransportFailure",
    "Verb",
    "build_request",
    "build_url",
    "bytes_decoder",
    "collect",
    "compose_headers",
    "decode_response",
    "json_decoder",
    "metadata_decoder",
    "setup_logging",
    "text_decoder",
]
