import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar

import httpx

from ._decoders import Decoder, ResponseMetadata, default_decoder
from ._headers import HTTPHeader, to_headers
from ._query import QueryItem, to_query
from ._request_builder import build_request, build_url
from ._response_parser import decode_response
from ._utils._request_spec import RequestSpec
from .models.errors import InvalidURLComponents

ResponseT = TypeVar("ResponseT")


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


class Verb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


_VERBS_WITH_BODY = frozenset({Verb.POST, Verb.PUT, Verb.PATCH})


@dataclass(frozen=True)
class HTTPMethod:
    """HTTP verb, carrying the request body for POST, PUT and PATCH.

    Use the constructors rather than instantiating directly::

        HTTPMethod.get()
        HTTPMethod.post(b'{"name": "a"}')
    """

    verb: Verb
    body: Optional[bytes] = None

    def __post_init__(self):
        object.__setattr__(self, "verb", Verb(self.verb))
        if self.verb in _VERBS_WITH_BODY:
            if not isinstance(self.body, (bytes, bytearray)):
                raise TypeError(
                    f"{self.verb.value} requires a bytes body, got {type(self.body).__name__}"
                )
            object.__setattr__(self, "body", bytes(self.body))
        elif self.body is not None:
            raise TypeError(f"{self.verb.value} does not take a body")

    @classmethod
    def get(cls) -> "HTTPMethod":
        return cls(Verb.GET)

    @classmethod
    def post(cls, body: bytes) -> "HTTPMethod":
        return cls(Verb.POST, body)

    @classmethod
    def put(cls, body: bytes) -> "HTTPMethod":
        return cls(Verb.PUT, body)

    @classmethod
    def patch(cls, body: bytes) -> "HTTPMethod":
        return cls(Verb.PATCH, body)

    @classmethod
    def delete(cls) -> "HTTPMethod":
        return cls(Verb.DELETE)

    @property
    def value(self) -> str:
        return self.verb.value


@dataclass(frozen=True)
class Endpoint(Generic[ResponseT]):
    """Immutable description of one HTTP call and how to decode its response.

    Every field except ``host`` has a default: HTTPS, GET, no port override, no
    query parameters and no extra headers. The response is decoded with
    ``decoder`` when given; otherwise ``response_type`` selects the default
    rule (``ResponseMetadata`` returns the metadata as-is, anything else is
    parsed as JSON into that type).

    Examples:
        ```python
        from pydantic import BaseModel
        from restbind import Authorization, Endpoint, HTTPHeader

        class User(BaseModel):
            id: int
            name: str

        endpoint = Endpoint(
            host="api.example.com",
            path="/users/1",
            headers=[HTTPHeader.authorization(Authorization.bearer("token"))],
            response_type=User,
        )
        ```
    """

    host: str
    path: str = ""
    scheme: Scheme = Scheme.HTTPS
    port: Optional[int] = None
    method: HTTPMethod = field(default_factory=HTTPMethod.get)
    query: Tuple[QueryItem, ...] = ()
    headers: Tuple[HTTPHeader, ...] = ()
    response_type: Any = None
    decoder: Optional[Decoder[ResponseT]] = None
    _decode: Decoder[ResponseT] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.host, str) or not self.host:
            raise InvalidURLComponents(
                f"Host must be a non-empty string, got {self.host!r}",
                {"host": self.host},
            )

        object.__setattr__(self, "scheme", Scheme(self.scheme))
        if isinstance(self.method, Verb):
            object.__setattr__(self, "method", HTTPMethod(self.method))
        elif isinstance(self.method, str):
            object.__setattr__(self, "method", HTTPMethod(Verb(self.method.upper())))
        object.__setattr__(self, "query", to_query(self.query))  # type: ignore[arg-type]
        object.__setattr__(self, "headers", to_headers(self.headers))  # type: ignore[arg-type]
        object.__setattr__(
            self, "_decode", self.decoder or default_decoder(self.response_type)
        )

    @property
    def uses_default_json_decoder(self) -> bool:
        return self.decoder is None and self.response_type is not ResponseMetadata

    def replace(self, **changes: Any) -> "Endpoint[ResponseT]":
        """Return a copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def build_url(self) -> httpx.URL:
        return build_url(self)

    def build_request(self) -> RequestSpec:
        return build_request(self)

    def decode_response(self, content: bytes, metadata: ResponseMetadata) -> ResponseT:
        return decode_response(self, content, metadata)
