"""Live views over a HashTable's buckets.

A view holds nothing but its table: every iteration walks the current buckets,
so changes to the table show up in views obtained earlier. Each table caches
one view of each kind.
"""
from collections.abc import Collection, Iterator, Set

from chaintable.entry import as_pair, values_equal
from chaintable.errors import IllegalState, NoSuchElement, UnsupportedOperation


class TableIterator(Iterator):
    """Walks bucket 0..capacity-1, descending each chain before moving on.

    Nothing is snapshotted; the iterator keeps only the bucket it is in and
    the node it will return next.
    """

    def __init__(self, table):
        self._table = table
        self._bucket = -1
        self._last = None
        self._upcoming = self._next_head()

    def has_next(self) -> bool:
        return self._upcoming is not None

    def next(self):
        return self._project(self._next_node())

    def __next__(self):
        return self.next()

    def remove(self) -> None:
        """Remove the element last returned by next()."""
        if self._last is None:
            raise IllegalState("Nothing to remove.")
        self._table._remove_exact(self._last)
        self._last = None

    def _project(self, node):
        return node

    def _next_node(self):
        if self._upcoming is None:
            raise NoSuchElement("Iterator is exhausted.")
        self._last = self._upcoming
        if self._last.next is not None:
            self._upcoming = self._last.next
        else:
            self._upcoming = self._next_head()
        return self._last

    def _next_head(self):
        buckets = self._table._buckets
        for index in range(self._bucket + 1, len(buckets)):
            if buckets[index] is not None:
                self._bucket = index
                return buckets[index]
        self._bucket = len(buckets)
        return None


class EntryIterator(TableIterator):
    pass


class KeyIterator(TableIterator):
    def _project(self, node):
        return node.key


class ValueIterator(TableIterator):
    def _project(self, node):
        return node.value


class _TableView(Collection):
    __slots__ = ("_table",)
    iterator_class = TableIterator

    def __init__(self, table):
        self._table = table

    def iterator(self) -> TableIterator:
        return self.iterator_class(self._table)

    def __iter__(self):
        return self.iterator()

    def __len__(self):
        return self._table.size()

    def size(self) -> int:
        return self._table.size()

    def is_empty(self) -> bool:
        return self._table.is_empty()

    def contains(self, o) -> bool:
        return o in self

    def contains_all(self, c) -> bool:
        return all(o in self for o in c)

    def to_list(self) -> list:
        return list(self)

    def add(self, item) -> bool:
        raise UnsupportedOperation(f"{type(self).__name__} does not support add().")

    def add_all(self, items) -> bool:
        raise UnsupportedOperation(f"{type(self).__name__} does not support add_all().")

    def clear(self) -> None:
        self._table.clear()

    def __repr__(self):
        return f"{type(self).__name__}({self.to_list()!r})"


class KeysView(_TableView, Set):
    __slots__ = ()
    iterator_class = KeyIterator

    @classmethod
    def _from_iterable(cls, it):
        return set(it)

    def __contains__(self, key):
        return self._table.contains_key(key)

    def remove(self, key) -> bool:
        return self._table._remove_node(key) is not None

    def remove_all(self, keys) -> bool:
        changed = False
        for key in keys:
            if self.remove(key):
                changed = True
        return changed

    def retain_all(self, keys) -> bool:
        keys = list(keys)
        if not keys:
            self.clear()
            return True
        return self._table._remove_where(lambda node: node.key not in keys)


class EntriesView(_TableView, Set):
    __slots__ = ()
    iterator_class = EntryIterator

    @classmethod
    def _from_iterable(cls, it):
        return set(it)

    def __contains__(self, o):
        pair = as_pair(o)
        if pair is None:
            return False
        return self._table._get_pair_node(*pair) is not None

    def add(self, entry) -> bool:
        """Put the pair unless the table already holds it."""
        pair = as_pair(entry)
        if pair is None or pair in self:
            return False
        self._table.put(*pair)
        return True

    def add_all(self, entries) -> bool:
        changed = False
        for entry in entries:
            if self.add(entry):
                changed = True
        return changed

    def remove(self, entry) -> bool:
        pair = as_pair(entry)
        if pair is None:
            return False
        node = self._table._get_pair_node(*pair)
        if node is None:
            return False
        return self._table._remove_exact(node)

    def remove_all(self, entries) -> bool:
        changed = False
        for entry in entries:
            if self.remove(entry):
                changed = True
        return changed

    def retain_all(self, entries) -> bool:
        pairs = [pair for pair in map(as_pair, entries) if pair is not None]
        if not pairs:
            self.clear()
            return True
        return self._table._remove_where(lambda node: (node.key, node.value) not in pairs)


class ValuesView(_TableView):
    __slots__ = ()
    iterator_class = ValueIterator

    def __contains__(self, value):
        return self._table.contains_value(value)

    def remove(self, value) -> bool:
        """Remove the first entry holding ``value``, in iteration order."""
        return self._table._remove_where(lambda node: values_equal(node.value, value), first_only=True)

    def remove_all(self, values) -> bool:
        values = list(values)
        if not values:
            return False
        return self._table._remove_where(lambda node: node.value in values)

    def retain_all(self, values) -> bool:
        values = list(values)
        if not values:
            return False
        return self._table._remove_where(lambda node: node.value not in values)
