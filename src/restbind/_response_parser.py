from typing import TYPE_CHECKING, TypeVar

from ._decoders import ResponseMetadata
from .models.errors import DecodingError

if TYPE_CHECKING:
    from ._endpoint import Endpoint

ResponseT = TypeVar("ResponseT")


def decode_response(
    endpoint: "Endpoint[ResponseT]", content: bytes, metadata: ResponseMetadata
) -> ResponseT:
    """Run the endpoint's decoder over a response body.

    Raises:
        DecodingError: Wrapping whatever the decoder raised.
    """
    try:
        return endpoint._decode(content, metadata)
    except Exception as e:
        raise DecodingError(e) from e
