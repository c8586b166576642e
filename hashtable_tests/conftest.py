import pytest
import os
from unittest.mock import patch, MagicMock

os.environ['TESTING'] = 'true'

from hashtable.hash_map import HashMap
from hashtable.hash_set import HashSet


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('hashtable.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.debug = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def hash_map():
    return HashMap()


@pytest.fixture
def hash_set():
    return HashSet()


@pytest.fixture
def colliding_map():
    # every key lands in the same bucket
    return HashMap(hash_function=lambda key: 7)


@pytest.fixture
def sample_pairs():
    return [("key-%d" % i, i) for i in range(15)]
