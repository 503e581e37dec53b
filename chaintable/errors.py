class HashTableError(Exception):
    """Base class for every error raised by chaintable."""


class InvalidArgument(HashTableError, ValueError):
    pass


class KeyRejected(HashTableError, TypeError):
    """The key cannot be hashed by the table's hash function."""


class NoSuchElement(HashTableError, StopIteration):
    """Raised by an iterator that has no more elements."""


class UnsupportedOperation(HashTableError, NotImplementedError):
    pass


class IllegalState(HashTableError, RuntimeError):
    pass
