from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import httpx


@dataclass(frozen=True)
class RequestSpec:
    """Encapsulates the wire-level form of one HTTP request.

    This class contains everything needed to send the request: the HTTP verb,
    the fully built URL, the ordered header pairs (duplicates preserved) and
    the optional body.
    """

    method: str
    url: httpx.URL
    headers: List[Tuple[str, str]] = field(default_factory=list)
    content: Optional[bytes] = None

    def header_values(self, name: str) -> List[str]:
        """Return every value sent for ``name``, compared case-insensitively."""
        return [value for field_, value in self.headers if field_.lower() == name.lower()]

    def to_httpx(self, client: Union[httpx.Client, httpx.AsyncClient]) -> httpx.Request:
        """Build the request on ``client`` so its base headers and settings apply."""
        return client.build_request(
            self.method,
            self.url,
            headers=self.headers,
            content=self.content,
        )
