import os

import pytest
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from chaintable.table import HashTable


class CollidingKey:
    """Key whose hash is chosen by the test, to force chains."""

    def __init__(self, name, hash_code):
        self.name = name
        self.hash_code = hash_code

    def __hash__(self):
        return self.hash_code

    def __eq__(self, other):
        return isinstance(other, CollidingKey) and other.name == self.name

    def __repr__(self):
        return f"CollidingKey({self.name!r}, {self.hash_code})"


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('chaintable.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.debug = MagicMock()
        mock_logger.error = MagicMock()
        mock_logger.isEnabledFor.return_value = True
        yield mock_logger


@pytest.fixture
def table():
    return HashTable()


@pytest.fixture
def filled_table():
    table = HashTable(capacity=10)
    for i in range(5):
        table.put(i, f"value-{i}")
    return table


@pytest.fixture
def colliding_table():
    # capacity 10 sends 7, 17, 27, 37 and 47 to bucket 7
    table = HashTable(capacity=10, load_factor=1)
    for key in (7, 17, 27, 37, 47):
        table.put(key, key * 10)
    return table
