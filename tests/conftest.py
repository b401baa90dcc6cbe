import pytest

from huffpress import build_huffman_codes, build_huffman_tree_from_frequencies

TEXTBOOK_FREQUENCIES = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}


@pytest.fixture
def textbook_tree():
    return build_huffman_tree_from_frequencies(TEXTBOOK_FREQUENCIES)


@pytest.fixture
def textbook_codes(textbook_tree):
    return build_huffman_codes(textbook_tree)
