from .errors import DecodingError, InvalidURLComponents, RestbindError, TransportFailure
from .results import LoadResult

__all__ = [
    "DecodingError",
    "InvalidURLComponents",
    "LoadResult",
    "RestbindError",
    "TransportFailure",
]
