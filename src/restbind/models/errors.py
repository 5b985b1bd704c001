from typing import Any, Optional

import httpx
from pydantic import ValidationError

# Transport exceptions are re-raised as-is; this alias only names their common base.
TransportFailure = httpx.HTTPError


class RestbindError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidURLComponents(RestbindError, ValueError):
    """Raised when an endpoint's components cannot form a valid URL.

    Raised before any network I/O takes place. The offending components are
    kept on ``components`` so callers can fix the descriptor.
    """

    def __init__(
        self,
        message: str = "Invalid URL components",
        components: Optional[dict[str, Any]] = None,
    ):
        self.components = components or {}
        super().__init__(message)


class DecodingError(RestbindError):
    """Raised when a response body does not match the decoder's expected shape.

    The underlying decoder exception is available as ``error`` (and as
    ``__cause__``). The message never echoes the response body, and the
    raw response bytes are not kept on this error.
    """

    def __init__(self, error: BaseException, message: Optional[str] = None):
        self.error = error
        super().__init__(message or f"Failed to decode response: {_describe(error)}")


def _describe(error: BaseException) -> str:
    if isinstance(error, ValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in detail['loc']) or '<body>'}: {detail['msg']}"
            for detail in error.errors(include_input=False, include_url=False)
        )
        return f"{error.error_count()} validation error(s) for {error.title}: {details}"
    return f"{type(error).__name__}: {error}"
