from chaintable.entry import Entry
from chaintable.errors import (
    HashTableError,
    IllegalState,
    InvalidArgument,
    KeyRejected,
    NoSuchElement,
    UnsupportedOperation,
)
from chaintable.table import HashTable
from chaintable.views import EntriesView, KeysView, ValuesView

__all__ = [
    "Entry",
    "EntriesView",
    "HashTable",
    "HashTableError",
    "IllegalState",
    "InvalidArgument",
    "KeyRejected",
    "KeysView",
    "NoSuchElement",
    "UnsupportedOperation",
    "ValuesView",
]
