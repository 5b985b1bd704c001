from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

import httpx
from pydantic import TypeAdapter

T = TypeVar("T")


@dataclass(frozen=True)
class ResponseMetadata:
    """Status line, headers and final URL of a response, without its body."""

    status_code: int
    reason_phrase: str
    headers: httpx.Headers
    url: httpx.URL
    http_version: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ResponseMetadata":
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=response.headers,
            url=response.url,
            http_version=response.http_version,
        )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("Content-Type")


Decoder = Callable[[bytes, ResponseMetadata], T]


def json_decoder(response_type: Any = None) -> Decoder[Any]:
    """Decoder that parses the body as JSON into ``response_type``.

    ``response_type`` can be anything pydantic validates (models, dataclasses,
    TypedDicts, builtin containers). ``None`` yields plain JSON values.
    Malformed JSON and shape mismatches both raise ``pydantic.ValidationError``.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(Any if response_type is None else response_type)

    def decode(content: bytes, metadata: ResponseMetadata) -> Any:
        return adapter.validate_json(content)

    return decode


def metadata_decoder(content: bytes, metadata: ResponseMetadata) -> ResponseMetadata:
    """Ignore the body and return the response metadata unchanged."""
    return metadata


def bytes_decoder(content: bytes, metadata: ResponseMetadata) -> bytes:
    return content


def text_decoder(encoding: Optional[str] = None) -> Decoder[str]:
    """Decoder returning the body as text.

    Uses ``encoding`` when given, otherwise the charset from ``Content-Type``,
    falling back to UTF-8. Undecodable bytes raise ``UnicodeDecodeError``.
    """

    def decode(content: bytes, metadata: ResponseMetadata) -> str:
        charset = encoding or _charset_from(metadata) or "utf-8"
        return content.decode(charset)

    return decode


def _charset_from(metadata: ResponseMetadata) -> Optional[str]:
    content_type = metadata.content_type
    if not content_type:
        return None
    for param in content_type.split(";")[1:]:
        key, _, value = param.strip().partition("=")
        if key.lower() == "charset" and value:
            return value.strip('"')
    return None


def default_decoder(response_type: Any) -> Decoder[Any]:
    if response_type is ResponseMetadata:
        return metadata_decoder
    return json_decoder(response_type)
