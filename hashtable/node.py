from typing import Any, Optional


class _Missing:
    """Marker for "no value", distinct from a stored None."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def _same(a: Any, b: Any) -> bool:
    return a is b or (a is not None and a == b)


class Node:
    """One entry of a bucket chain.

    The hash and key are fixed at creation; the value and the link to the
    next entry in the bucket are mutable.
    """
    __slots__ = ("_hash", "_key", "value", "next")

    def __init__(self, hash_: int, key: Any, value: Any, next_: Optional["Node"] = None):
        self._hash = hash_
        self._key = key
        self.value = value
        self.next: Optional[Node] = next_

    @property
    def hash(self) -> int:
        return self._hash

    @property
    def key(self) -> Any:
        return self._key

    def set_value(self, value: Any) -> Any:
        old_value = self.value
        self.value = value
        return old_value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return _same(self._key, other._key) and _same(self.value, other.value)

    def __hash__(self) -> int:
        key_hash = 0 if self._key is None else hash(self._key)
        value_hash = 0 if self.value is None else hash(self.value)
        return key_hash ^ value_hash

    def __str__(self) -> str:
        return f"{self._key}, {self.value}"

    def __repr__(self) -> str:
        return f"Node(hash={self._hash}, key={self._key!r}, value={self.value!r})"
