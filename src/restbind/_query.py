from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class QueryItem:
    """One ``name[=value]`` query parameter. ``value=None`` renders as a bare name."""

    name: str
    value: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Query name must be a string, got {type(self.name).__name__}")
        if self.value is not None and not isinstance(self.value, str):
            object.__setattr__(self, "value", _stringify(self.value))

    def as_tuple(self) -> Tuple[str, Optional[str]]:
        return (self.name, self.value)


QueryLike = Union[QueryItem, Tuple[str, object]]
QueryInput = Union[Mapping[str, object], Iterable[QueryLike]]


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query(query: QueryInput) -> Tuple[QueryItem, ...]:
    """Normalize a mapping or a sequence of pairs into ordered ``QueryItem`` values."""
    if isinstance(query, Mapping):
        return tuple(QueryItem(name, value) for name, value in query.items())  # type: ignore[arg-type]

    normalized = []
    for item in query:
        if isinstance(item, QueryItem):
            normalized.append(item)
        else:
            name, value = item
            normalized.append(QueryItem(name, value))  # type: ignore[arg-type]
    return tuple(normalized)
