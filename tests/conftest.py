import sys
import os
import pytest

# Ensure src and the tests directory are in the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from fixtures.dictionary_helpers import SCENARIO_DICT, create_test_engine


@pytest.fixture
def scenario_engine():
    """Engine over the small ad/ads/sad/fads/fa/as dictionary."""
    return create_test_engine(SCENARIO_DICT)


@pytest.fixture
def words_file(tmp_path):
    """Write a word list to a temporary file and return its path."""
    def write(lines):
        path = tmp_path / "words.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return write
