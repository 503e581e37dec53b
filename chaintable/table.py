"""Key/value map built on separate chaining.

Every bucket of the backing list holds either ``None`` or the head of a singly
linked chain of :class:`Entry` nodes. New keys are appended at the tail of
their chain, so iteration visits bucket 0's chain in insertion order, then
bucket 1's, and so on.

Bucket index is ``hash % capacity``. Python integers never overflow and ``%``
with a positive divisor is never negative, so no ``abs()`` is needed.

The table is not thread safe. Mutating it while iterating over one of its
views, other than through that iterator's ``remove()``, is undefined.
"""
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Hashable, Optional

from chaintable import config
from chaintable.entry import Entry, keys_equal, values_equal
from chaintable.errors import InvalidArgument, KeyRejected
from chaintable.logger.log_types import LogEvent
from chaintable.logger.logger import log_error_event, log_resize_event, log_table_event
from chaintable.views import EntriesView, KeysView, ValuesView

# hash used for the None key
NONE_HASH = 0


class HashTable(MutableMapping):
    def __init__(
        self,
        capacity: Optional[int] = None,
        load_factor: Optional[float] = None,
        hash_function: Optional[Callable[[Any], int]] = None,
    ) -> None:
        capacity = config.DEFAULT_CAPACITY if capacity is None else capacity
        load_factor = config.DEFAULT_LOAD_FACTOR if load_factor is None else load_factor
        _validate(capacity, load_factor)

        self._load_factor = float(load_factor)
        self._hash_function = hash_function or hash
        self._buckets: list[Optional[Entry]] = [None] * capacity
        self._size = 0

        self._entries_view: Optional[EntriesView] = None
        self._keys_view: Optional[KeysView] = None
        self._values_view: Optional[ValuesView] = None

        log_table_event(LogEvent.TABLE_CREATED, capacity, 0, self._load_factor)

    @classmethod
    def with_capacity(cls, capacity: int, **kwargs) -> "HashTable":
        return cls(capacity=capacity, **kwargs)

    @classmethod
    def with_load_factor(cls, load_factor: float, **kwargs) -> "HashTable":
        return cls(load_factor=load_factor, **kwargs)

    @classmethod
    def with_capacity_and_load_factor(cls, capacity: int, load_factor: float, **kwargs) -> "HashTable":
        return cls(capacity=capacity, load_factor=load_factor, **kwargs)

    @classmethod
    def from_existing(cls, source, **kwargs) -> "HashTable":
        """Build a table holding every key/value pair of ``source``."""
        table = cls(**kwargs)
        table.put_all(source)
        return table

    # Queries

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._buckets)

    def load_factor(self) -> float:
        return self._load_factor

    def contains_key(self, key: Hashable) -> bool:
        return self._get_node(key) is not None

    def contains_value(self, value: Any) -> bool:
        for node in self._nodes():
            if values_equal(node.value, value):
                return True
        return False

    def get(self, key: Hashable, default: Any = None) -> Any:
        node = self._get_node(key)
        return default if node is None else node.value

    # Mutation

    def put(self, key: Hashable, value: Any) -> Any:
        """Map ``key`` to ``value``; return the previous value or None."""
        hash_code = self._hash(key)
        index = self._index(hash_code)
        head = self._buckets[index]

        if head is None:
            self._buckets[index] = Entry(hash_code, key, value)
            self._grow()
            return None

        node = head
        while True:
            if node.hash == hash_code and keys_equal(node.key, key):
                return node.set_value(value)
            if node.next is None:
                node.next = Entry(hash_code, key, value)
                self._grow()
                return None
            node = node.next

    def remove(self, key: Hashable) -> Any:
        """Unmap ``key``; return the removed value or None."""
        node = self._remove_node(key)
        return None if node is None else node.value

    def put_all(self, source) -> None:
        if source is None:
            return
        if isinstance(source, Mapping):
            pairs = source.items()
        elif hasattr(source, "keys"):
            pairs = ((key, source[key]) for key in source.keys())
        else:
            pairs = source
        for key, value in pairs:
            self.put(key, value)

    def clear(self) -> None:
        """Drop every entry. Capacity is kept; tables never shrink."""
        if self._size == 0:
            return
        self._buckets = [None] * len(self._buckets)
        self._size = 0
        log_table_event(LogEvent.TABLE_CLEARED, len(self._buckets), 0, self._load_factor)

    # Views

    def entries(self) -> EntriesView:
        if self._entries_view is None:
            self._entries_view = EntriesView(self)
        return self._entries_view

    items = entries

    def keys(self) -> KeysView:
        if self._keys_view is None:
            self._keys_view = KeysView(self)
        return self._keys_view

    def values(self) -> ValuesView:
        if self._values_view is None:
            self._values_view = ValuesView(self)
        return self._values_view

    # Mapping protocol

    def __getitem__(self, key):
        node = self._get_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if self._remove_node(key) is None:
            raise KeyError(key)

    def __contains__(self, key):
        return self.contains_key(key)

    def __iter__(self):
        return iter(self.keys())

    def __len__(self):
        return self._size

    def __repr__(self):
        body = ", ".join(f"{node.key!r}: {node.value!r}" for node in self._nodes())
        return f"{type(self).__name__}({{{body}}})"

    # Chain maintenance, shared with the views

    def _hash(self, key) -> int:
        if key is None:
            return NONE_HASH
        try:
            return self._hash_function(key)
        except TypeError as e:
            log_error_event(LogEvent.KEY_REJECTED, str(e))
            raise KeyRejected(f"Key {key!r} cannot be hashed: {e}") from e

    def _index(self, hash_code: int, buckets: Optional[list] = None) -> int:
        return hash_code % len(self._buckets if buckets is None else buckets)

    def _nodes(self):
        for head in self._buckets:
            node = head
            while node is not None:
                yield node
                node = node.next

    def _get_node(self, key) -> Optional[Entry]:
        hash_code = self._hash(key)
        node = self._buckets[self._index(hash_code)]
        while node is not None:
            if node.hash == hash_code and keys_equal(node.key, key):
                return node
            node = node.next
        return None

    def _get_pair_node(self, key, value) -> Optional[Entry]:
        node = self._get_node(key)
        if node is not None and values_equal(node.value, value):
            return node
        return None

    def _remove_node(self, key) -> Optional[Entry]:
        hash_code = self._hash(key)
        index = self._index(hash_code)
        previous = None
        node = self._buckets[index]
        while node is not None:
            if node.hash == hash_code and keys_equal(node.key, key):
                self._unlink(index, previous, node)
                return node
            previous = node
            node = node.next
        return None

    def _remove_exact(self, target: Entry) -> bool:
        """Unlink ``target`` itself, found by identity."""
        index = self._index(target.hash)
        previous = None
        node = self._buckets[index]
        while node is not None:
            if node is target:
                self._unlink(index, previous, node)
                return True
            previous = node
            node = node.next
        return False

    def _remove_where(self, predicate: Callable[[Entry], bool], first_only: bool = False) -> bool:
        """Unlink every node matching ``predicate``; return whether any was."""
        changed = False
        for index in range(len(self._buckets)):
            previous = None
            node = self._buckets[index]
            while node is not None:
                following = node.next
                if predicate(node):
                    self._unlink(index, previous, node)
                    if first_only:
                        return True
                    changed = True
                else:
                    previous = node
                node = following
        return changed

    def _unlink(self, index: int, previous: Optional[Entry], node: Entry) -> None:
        if previous is None:
            self._buckets[index] = node.next
        else:
            previous.next = node.next
        node.next = None
        self._size -= 1

    def _needs_expansion(self, entries: int) -> bool:
        return entries >= len(self._buckets) * self._load_factor

    def _grow(self) -> None:
        self._size += 1
        if self._needs_expansion(self._size):
            self._resize()

    def _resize(self) -> None:
        """Double the bucket list and relink the existing nodes into it.

        Nodes keep their cached hash and are moved, not re-inserted, so the
        size is untouched and each chain keeps its relative order.
        """
        old_buckets = self._buckets
        new_buckets: list[Optional[Entry]] = [None] * (len(old_buckets) * 2)
        tails: list[Optional[Entry]] = [None] * len(new_buckets)

        for head in old_buckets:
            node = head
            while node is not None:
                following = node.next
                node.next = None
                index = self._index(node.hash, new_buckets)
                tail = tails[index]
                if tail is None:
                    new_buckets[index] = node
                else:
                    tail.next = node
                tails[index] = node
                node = following

        self._buckets = new_buckets
        log_resize_event(len(old_buckets), len(new_buckets), self._size)


def _validate(capacity, load_factor) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        _reject(f"Capacity must be an integer, got {capacity!r}.")
    if capacity < 2:
        _reject("Capacity must be at least 2.")
    if isinstance(load_factor, bool) or not isinstance(load_factor, (int, float)):
        _reject(f"Load factor must be a number, got {load_factor!r}.")
    # negated so NaN is rejected too
    if not load_factor > 0:
        _reject("Load factor must be greater than zero.")
    if not load_factor <= 1:
        _reject("Load factor must be less than or equal to one.")


def _reject(message: str) -> None:
    log_error_event(LogEvent.INVALID_ARGUMENT, message)
    raise InvalidArgument(message)
