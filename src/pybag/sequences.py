"""Small generic helpers for sequences and mappings."""

from typing import Hashable, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def ternary(cond: bool, if_true: T, if_false: T) -> T:
    """Return if_true when cond holds, otherwise if_false."""
    if cond:
        return if_true
    return if_false


def deduplicate(items: Optional[Iterable[T]]) -> List[T]:
    """
    Return a new list with duplicates removed, keeping first occurrences.

    None or an empty iterable gives an empty list. Hashable elements are
    tracked in a set; unhashable ones fall back to an equality scan.
    """
    result: List[T] = []
    if items is None:
        return result

    seen = set()
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            # unhashable
            if item in result:
                continue
        result.append(item)
    return result


def contains(items: Iterable[T], elem: T) -> bool:
    """Report whether elem is in items, using equality comparison."""
    for item in items:
        if item == elem:
            return True
    return False


def keys(mapping: Mapping[K, object]) -> List[K]:
    """Return the keys of mapping. Callers must not rely on their order."""
    return list(mapping.keys())


__all__ = [
    "ternary",
    "deduplicate",
    "contains",
    "keys",
]
