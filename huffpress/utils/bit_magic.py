from typing import Dict, Sequence
import numpy as np
from collections import Counter
from .types import CodeTable, Symbol


def count_frequencies(data: Sequence[Symbol]) -> Dict[Symbol, int]:
    # Symbols keep the order of their first occurrence
    return dict(Counter(data))


def calculate_entropy(data: Sequence[Symbol]) -> float:
    if len(data) == 0:
        return 0.0
    frequencies = Counter(data)
    return float(-sum(map(lambda f: f / len(data) * np.log2(f / len(data)), frequencies.values())))


def calculate_average_code_length(frequencies: Dict[Symbol, int], codes: CodeTable) -> float:
    total = sum(frequencies.values())
    if total == 0:
        return 0.0
    weights = np.array([frequencies[symbol] for symbol in codes], dtype=np.float64)
    lengths = np.array([len(code) for code in codes.values()], dtype=np.float64)
    return float(np.dot(weights, lengths) / total)


def extend_bytearray_with_bitstream(byte_array: bytearray, bitstream: str) -> None:
    # Make sure the binary string length is a multiple of 8 by padding with zeros if necessary
    padding_length = (8 - len(bitstream) % 8) % 8
    bitstream += '0' * padding_length

    # Convert the binary string to a bytearray
    byte_array.extend(int(bitstream[i:i + 8], 2) for i in range(0, len(bitstream), 8))


def bytes_to_bitstream(data: bytes, bit_count: int) -> str:
    if bit_count > len(data) * 8:
        raise ValueError(f"Requested {bit_count} bits from only {len(data) * 8} available.")
    bitstream = ''.join(bin(byte)[2:].rjust(8, '0') for byte in data)
    return bitstream[:bit_count]
