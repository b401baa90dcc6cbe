import random

import pytest

from huffpress import (
    CorruptStreamError,
    HuffmanDecoder,
    HuffmanEncoder,
    HuffmanNode,
    TruncatedStreamError,
    UnknownSymbolError,
    build_huffman_codes,
    build_huffman_tree_from_frequencies,
    calculate_huffman_codes,
    huffman_decode,
    huffman_encode,
)


def test_encode_concatenates_codes(textbook_codes):
    assert huffman_encode("fab", textbook_codes) == "0" + "1100" + "1101"
    assert huffman_encode([], textbook_codes) == ""


def test_encode_unknown_symbol_raises(textbook_codes):
    with pytest.raises(UnknownSymbolError) as excinfo:
        huffman_encode("fz", textbook_codes)
    assert excinfo.value.symbol == "z"


def test_decode_textbook(textbook_tree):
    assert huffman_decode("0110011010111", textbook_tree) == ["f", "a", "b", "f", "e"]


def test_decode_accepts_integer_bits(textbook_tree):
    assert huffman_decode([1, 0, 0, 0], textbook_tree) == ["c", "f"]


def test_decode_empty_stream(textbook_tree):
    assert huffman_decode("", textbook_tree) == []


def test_round_trip_random_text():
    rng = random.Random(1234)
    data = [rng.choice("aaaaabbbccde") for _ in range(500)]
    frequencies, root, codes = calculate_huffman_codes(data)

    assert huffman_decode(huffman_encode(data, codes), root) == data


def test_round_trip_bytes():
    data = bytes(range(256)) * 3 + b"huffman" * 50
    _, root, codes = calculate_huffman_codes(data)

    assert bytes(huffman_decode(huffman_encode(data, codes), root)) == data


def test_single_symbol_alphabet():
    root = build_huffman_tree_from_frequencies({"A": 5})
    codes = build_huffman_codes(root)

    assert huffman_encode(["A", "A", "A"], codes) == "000"
    assert huffman_decode("000", root) == ["A", "A", "A"]
    assert huffman_decode("101", root) == ["A", "A", "A"]


def test_single_symbol_alphabet_rejects_non_bits():
    root = build_huffman_tree_from_frequencies({"A": 5})
    with pytest.raises(CorruptStreamError):
        huffman_decode("0x", root)


def test_invalid_bit_raises(textbook_tree):
    with pytest.raises(CorruptStreamError):
        huffman_decode("2", textbook_tree)
    with pytest.raises(CorruptStreamError):
        huffman_decode([0, 5], textbook_tree)


def test_truncated_stream_raises(textbook_tree):
    # "1" is only the first edge of every code below the right child
    with pytest.raises(TruncatedStreamError):
        huffman_decode("1", textbook_tree)
    with pytest.raises(TruncatedStreamError):
        huffman_decode("0110", textbook_tree)


def test_truncated_stream_on_left_heavy_tree():
    root = build_huffman_tree_from_frequencies({"x": 10, "y": 1, "z": 1})
    assert build_huffman_codes(root) == {"y": "00", "z": "01", "x": "1"}
    with pytest.raises(TruncatedStreamError):
        huffman_decode("0", root)


def test_missing_child_raises():
    root = HuffmanNode(2, left=HuffmanNode(1, "a"), right=HuffmanNode(1, right=HuffmanNode(1, "b")))
    with pytest.raises(CorruptStreamError):
        huffman_decode("10", root)


def test_incremental_decoder(textbook_tree):
    decoder = HuffmanDecoder(textbook_tree)

    assert decoder.feed("1") is None
    assert not decoder.at_boundary
    assert decoder.feed("1") is None
    assert decoder.feed("1") == "e"
    assert decoder.at_boundary

    assert decoder.feed_bits("0110") == ["f"]
    with pytest.raises(TruncatedStreamError):
        decoder.finish()

    assert decoder.feed_bits("0") == ["a"]
    decoder.finish()


def test_decoder_reset(textbook_tree):
    decoder = HuffmanDecoder(textbook_tree)
    decoder.feed_bits("11")
    decoder.reset()
    assert decoder.at_boundary
    assert decoder.feed_bits("0") == ["f"]


def test_huffman_encoder_round_trip():
    encoder = HuffmanEncoder({"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45})
    data = list("fedcbaabcdef")

    encoded = encoder.encode(data)
    assert set(encoded) <= {"0", "1"}
    assert encoder.decode(encoded) == data


def test_huffman_encoder_average_code_length():
    encoder = HuffmanEncoder({"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45})
    # 45*1 + (12+13+16)*3 + (5+9)*4 = 224
    assert encoder.average_code_length() == pytest.approx(2.24)


def test_huffman_encoder_does_not_share_frequencies():
    frequencies = {"a": 1, "b": 2}
    encoder = HuffmanEncoder(frequencies)
    frequencies["c"] = 10

    assert "c" not in encoder.huffman_codes
    with pytest.raises(UnknownSymbolError):
        encoder.encode(["c"])


def test_huffman_encoder_verbose_prints_statistics(capsys):
    HuffmanEncoder({"a": 1, "b": 3}, verbose=True)
    out = capsys.readouterr().out
    assert "Alphabet size: 2" in out
    assert "Tree depth: 1" in out
    assert "- Symbol 'a' (weight 1): 0" in out
    assert "- Symbol 'b' (weight 3): 1" in out
