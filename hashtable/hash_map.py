import math
import sys
from typing import Any, Callable, List, Optional

from hashtable.config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR
from hashtable.logger.log_types import LogEvent
from hashtable.logger.logger import log_error_event, log_table_event
from hashtable.node import MISSING, Node


class HashMap:
    """Hash table with separate chaining.

    Keys are compared by identity first, then by equality. ``None`` is a valid
    key: it always hashes to 0 and lives in bucket 0. Lookups and removals
    that find nothing return ``MISSING`` rather than ``None``, so a stored
    ``None`` value can be told apart from an absent key.

    The table grows by doubling once ``size() >= threshold`` after an
    insertion; it never shrinks. Not safe for concurrent mutation.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
        hash_function: Optional[Callable[[Any], int]] = None,
    ) -> None:
        if capacity < 0:
            _invalid_argument(f"Illegal capacity: {capacity}")
        if load_factor <= 0 or math.isnan(load_factor):
            _invalid_argument(f"Illegal load factor: {load_factor}")

        self._hash = hash_function or hash
        self._load_factor = load_factor
        self._size = 0
        self.table: List[Optional[Node]] = [None] * capacity
        self.threshold = _threshold_for(capacity, load_factor)

        log_table_event(LogEvent.TABLE_CREATED, capacity, self._size, self.threshold)

    @property
    def load_factor(self) -> float:
        return self._load_factor

    @property
    def capacity(self) -> int:
        return len(self.table)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"HashMap(size={self._size}, capacity={self.capacity}, load_factor={self._load_factor})"

    def _hash_for(self, key: Any) -> int:
        if key is None:
            return 0
        return self._hash(key)

    def _bucket_index(self, hash_key: int, capacity: int) -> int:
        return hash_key % capacity

    def _find(self, key: Any) -> Optional[Node]:
        if not self.table:
            return None
        hash_key = self._hash_for(key)
        node = self.table[self._bucket_index(hash_key, len(self.table))]
        while node is not None:
            if node.hash == hash_key and (node.key is key or node.key == key):
                return node
            node = node.next
        return None

    def _add_node(self, hash_key: int, key: Any, value: Any, idx: int) -> None:
        self.table[idx] = Node(hash_key, key, value, self.table[idx])
        self._size += 1
        if self._size >= self.threshold:
            self._resize(2 * len(self.table))

    def _resize(self, new_capacity: int) -> None:
        old_table = self.table
        new_table: List[Optional[Node]] = [None] * new_capacity

        for head in old_table:
            node = head
            while node is not None:
                next_ = node.next
                idx = self._bucket_index(node.hash, new_capacity)
                node.next = new_table[idx]
                new_table[idx] = node
                node = next_

        self.table = new_table
        self.threshold = _threshold_for(new_capacity, self._load_factor)
        log_table_event(
            LogEvent.TABLE_RESIZED,
            new_capacity,
            self._size,
            self.threshold,
            previous_capacity=len(old_table),
        )

    def put(self, key: Any, value: Any) -> Any:
        """Associate ``value`` with ``key``.

        Returns the value previously stored for ``key``, or ``MISSING`` if the
        key was not present.
        """
        node = self._find(key)
        if node is not None:
            return node.set_value(value)

        if not self.table:
            self._resize(1)
        hash_key = self._hash_for(key)
        self._add_node(hash_key, key, value, self._bucket_index(hash_key, len(self.table)))
        return MISSING

    def get(self, key: Any, default: Any = MISSING) -> Any:
        node = self._find(key)
        return default if node is None else node.value

    def remove(self, key: Any) -> Any:
        """Unlink the entry for ``key`` and return its value (``MISSING`` if absent)."""
        if not self.table:
            return MISSING
        hash_key = self._hash_for(key)
        idx = self._bucket_index(hash_key, len(self.table))

        removed = MISSING
        prev = None
        node = self.table[idx]
        while node is not None:
            next_ = node.next
            if node.hash == hash_key and (node.key is key or node.key == key):
                if prev is None:
                    self.table[idx] = next_
                else:
                    prev.next = next_
                node.next = None
                self._size -= 1
                removed = node.value
            else:
                prev = node
            node = next_
        return removed

    def clear(self) -> None:
        table = self.table
        for i in range(len(table)):
            table[i] = None
        self._size = 0
        log_table_event(LogEvent.TABLE_CLEARED, len(table), self._size, self.threshold)

    def contains_key(self, key: Any) -> bool:
        if key is None:
            _invalid_argument("contains_key() does not accept None")

        for head in self.table:
            node = head
            while node is not None:
                if node.key is key or node.key == key:
                    return True
                node = node.next
        return False

    def contains_value(self, value: Any) -> bool:
        if value is None:
            _invalid_argument("contains_value() does not accept None")

        for head in self.table:
            node = head
            while node is not None:
                if node.value is value or node.value == value:
                    return True
                node = node.next
        return False


def _threshold_for(capacity: int, load_factor: float) -> int:
    # an infinite load factor saturates, like Java's (int) cast
    product = capacity * load_factor
    if math.isnan(product) or product >= sys.maxsize:
        return sys.maxsize
    return int(product)


def _invalid_argument(message: str) -> None:
    log_error_event(LogEvent.INVALID_ARGUMENT, message)
    raise ValueError(message)
