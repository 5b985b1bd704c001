from typing import Any, List


def collect(*parts: Any) -> List[Any]:
    """Flatten ``parts`` into a single list.

    ``None`` and ``False`` entries are skipped and nested lists are flattened,
    so optional or conditional items can be written inline. Tuples are kept
    whole, which lets raw ``(field, value)`` pairs pass through.

    Examples:
        >>> debug = False
        >>> collect("a", None, ["b", ["c"]], debug and "d")
        ['a', 'b', 'c']
    """
    items: List[Any] = []
    for part in parts:
        if part is None or part is False:
            continue
        if isinstance(part, list):
            items.extend(collect(*part))
        else:
            items.append(part)
    return items
