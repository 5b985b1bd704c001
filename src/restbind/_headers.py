import base64
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Tuple, Union

from ._utils.constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    SINGLETON_HEADERS,
)


class MIMEType(str, Enum):
    JSON = "application/json"
    XML = "application/xml"
    URLENCODED = "application/x-www-form-urlencoded"
    TEXT = "text/plain"
    HTML = "text/html"
    CSS = "text/css"
    JAVASCRIPT = "text/javascript"
    GIF = "image/gif"
    PNG = "image/png"
    JPEG = "image/jpeg"
    BMP = "image/bmp"
    WEBP = "image/webp"
    MIDI = "audio/midi"
    MPEG = "audio/mpeg"
    WAV = "audio/wav"
    PDF = "application/pdf"


@dataclass(frozen=True)
class Authorization:
    """Credential carried in an ``Authorization`` header."""

    scheme: str
    credentials: str

    @classmethod
    def bearer(cls, token: str) -> "Authorization":
        return cls("Bearer", token)

    @classmethod
    def basic(cls, credentials: str) -> "Authorization":
        """Basic credentials that are already base64 encoded."""
        return cls("Basic", credentials)

    @classmethod
    def basic_auth(cls, username: str, password: str) -> "Authorization":
        raw = f"{username}:{password}".encode("utf-8")
        return cls("Basic", base64.b64encode(raw).decode("ascii"))

    @property
    def value(self) -> str:
        return f"{self.scheme} {self.credentials}"


@dataclass(frozen=True)
class HTTPHeader:
    """A single ``field: value`` header pair.

    The classmethods are shorthands for common fields and produce exactly the
    pair a raw ``HTTPHeader(field, value)`` would.
    """

    field: str
    value: str

    def __post_init__(self):
        if not isinstance(self.field, str) or not self.field:
            raise ValueError(f"Header field must be a non-empty string, got {self.field!r}")
        if not isinstance(self.value, str):
            raise TypeError(
                f"Header value for {self.field!r} must be a string, got {type(self.value).__name__}"
            )

    @classmethod
    def accept(cls, mime_type: MIMEType) -> "HTTPHeader":
        return cls(HEADER_ACCEPT, MIMEType(mime_type).value)

    @classmethod
    def content_type(cls, mime_type: MIMEType) -> "HTTPHeader":
        return cls(HEADER_CONTENT_TYPE, MIMEType(mime_type).value)

    @classmethod
    def content_length(cls, length: int) -> "HTTPHeader":
        if length < 0:
            raise ValueError("Content-Length cannot be negative")
        return cls(HEADER_CONTENT_LENGTH, str(length))

    @classmethod
    def authorization(cls, auth: Authorization) -> "HTTPHeader":
        return cls(HEADER_AUTHORIZATION, auth.value)

    def as_tuple(self) -> Tuple[str, str]:
        return (self.field, self.value)


HeaderLike = Union[HTTPHeader, Tuple[str, str]]
HeadersInput = Union[Mapping[str, str], Iterable[HeaderLike]]


def to_headers(headers: HeadersInput) -> Tuple[HTTPHeader, ...]:
    """Normalize a mapping or a sequence of pairs into ``HTTPHeader`` values."""
    if isinstance(headers, Mapping):
        return tuple(HTTPHeader(field, value) for field, value in headers.items())

    normalized = []
    for header in headers:
        if isinstance(header, HTTPHeader):
            normalized.append(header)
        else:
            field, value = header
            normalized.append(HTTPHeader(field, value))
    return tuple(normalized)


def compose_headers(headers: Iterable[HTTPHeader]) -> List[Tuple[str, str]]:
    """Flatten headers into ordered wire pairs.

    Headers are appended in order and duplicates are kept. For singleton
    fields (``Content-Type``, ``Content-Length``, ``Authorization``, ``Host``,
    ``User-Agent``) the last value wins and keeps the position of the first
    occurrence.
    """
    pairs: List[Tuple[str, str]] = []
    singleton_index: dict[str, int] = {}

    for header in headers:
        key = header.field.lower()
        if key in SINGLETON_HEADERS:
            if key in singleton_index:
                pairs[singleton_index[key]] = header.as_tuple()
                continue
            singleton_index[key] = len(pairs)
        pairs.append(header.as_tuple())

    return pairs


def has_header(headers: Iterable[HTTPHeader], field: str) -> bool:
    return any(header.field.lower() == field.lower() for header in headers)
