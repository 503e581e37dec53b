from typing import Any, Optional


class Entry:
    """One node of a bucket chain.

    The hash is cached when the entry is created and reused on resize. The key
    is fixed once stored; the value may be replaced in place.
    """
    __slots__ = ("hash", "_key", "value", "next")

    def __init__(self, hash: int, key: Any, value: Any, next: "Optional[Entry]" = None) -> None:
        self.hash = hash
        self._key = key
        self.value = value
        self.next = next

    @property
    def key(self) -> Any:
        return self._key

    def set_value(self, value: Any) -> Any:
        before = self.value
        self.value = value
        return before

    def __iter__(self):
        yield self._key
        yield self.value

    def __eq__(self, other):
        if self is other:
            return True
        pair = as_pair(other)
        if pair is None:
            return NotImplemented
        return keys_equal(self._key, pair[0]) and values_equal(self.value, pair[1])

    def __hash__(self):
        try:
            return hash((self._key, self.value))
        except TypeError:
            # key hashable only by the table's hash function, or value unhashable
            return self.hash

    def __repr__(self):
        return f"Entry({self._key!r}, {self.value!r})"


def as_pair(o):
    """Return ``(key, value)`` for an Entry or a 2-tuple, else None."""
    if isinstance(o, Entry):
        return o.key, o.value
    if isinstance(o, tuple) and len(o) == 2:
        return o
    return None


def keys_equal(stored, key) -> bool:
    # None only ever matches None
    if stored is key:
        return True
    if stored is None or key is None:
        return False
    return stored == key


def values_equal(stored, value) -> bool:
    return stored is value or stored == value
