import os
from unittest.mock import MagicMock, patch

import pytest

os.environ.setdefault('TESTING', 'true')

from chained_hash.chained_hash_set import ChainedHashSet
from chained_hash.dictionaries.chained_hash_dictionary import ChainedHashDictionary


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('chained_hash.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def squares():
    d = ChainedHashDictionary()
    for i in range(1, 201):
        d.put(i, i * i)
    return d


@pytest.fixture
def colliding_dict():
    # every key hashes to the same bucket
    return ChainedHashDictionary(hash_function=lambda key: 7)


@pytest.fixture
def letters_set():
    s = ChainedHashSet()
    for item in ["a", "b", "a", "c"]:
        s.add(item)
    return s


@pytest.fixture
def sample_lines():
    return ["apple\n", "banana\n", "apple\n", "cherry\n", "banana\n", "date\n", "apple\n"]
