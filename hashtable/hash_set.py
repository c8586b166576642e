from typing import Any, Callable, Optional

from hashtable.config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR
from hashtable.hash_map import HashMap
from hashtable.node import MISSING

# Dummy value stored against every element in the backing map
PRESENT = object()


class HashSet:
    """Collection of unique elements backed by a HashMap."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
        hash_function: Optional[Callable[[Any], int]] = None,
    ) -> None:
        self._map = HashMap(capacity, load_factor, hash_function)

    def size(self) -> int:
        return self._map.size()

    def is_empty(self) -> bool:
        return self._map.is_empty()

    def __len__(self) -> int:
        return self._map.size()

    def add(self, element: Any) -> bool:
        """Add ``element``; False if it was already present."""
        return self._map.put(element, PRESENT) is MISSING

    def remove(self, element: Any) -> bool:
        """Remove ``element``; True if it was present."""
        return self._map.remove(element) is PRESENT

    def clear(self) -> None:
        self._map.clear()

    def contains(self, element: Any) -> bool:
        return self._map.contains_key(element)
