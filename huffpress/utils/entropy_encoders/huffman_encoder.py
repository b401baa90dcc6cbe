from tqdm import tqdm
from .entropy_encoder import EntropyEncoder
from ..bit_magic import calculate_average_code_length
from ..errors import CorruptStreamError, TruncatedStreamError, UnknownSymbolError
from ..huffman_tree import build_huffman_codes, build_huffman_tree_from_frequencies
from ..types import Bit, Bits, CodeTable, HuffmanNode, Symbol
from typing import Dict, Iterable, List, Optional

_BIT_VALUES = {"0": 0, "1": 1, 0: 0, 1: 1}


def _to_bit(bit: Bit) -> int:
    try:
        return _BIT_VALUES[bit]
    except (KeyError, TypeError):
        raise CorruptStreamError(f"Invalid bit value {bit!r}, expected 0 or 1.") from None


def huffman_encode(data: Iterable[Symbol], codes: CodeTable) -> str:
    encoded_symbols = []
    for symbol in data:
        try:
            encoded_symbols.append(codes[symbol])
        except KeyError:
            raise UnknownSymbolError(symbol) from None
    return ''.join(encoded_symbols)


class HuffmanDecoder:
    """
    Incremental Huffman decoder.

    Keeps the current position in the tree between calls, so bits can be fed
    one at a time as they arrive. A symbol is emitted each time a leaf is
    reached, after which the cursor goes back to the root.
    """

    def __init__(self, root: HuffmanNode):
        self.root = root
        self.node = root

    @property
    def at_boundary(self) -> bool:
        return self.node is self.root

    def reset(self) -> None:
        self.node = self.root

    def _step(self, bit: Bit) -> Optional[HuffmanNode]:
        value = _to_bit(bit)

        # Single symbol alphabet: every bit stands for one occurrence
        if self.root.is_leaf:
            return self.root

        child = self.node.left if value == 0 else self.node.right
        if child is None:
            raise CorruptStreamError("Bit stream walks past a missing child, stream does not match the tree.")

        if child.is_leaf:
            self.node = self.root
            return child

        self.node = child
        return None

    def feed(self, bit: Bit) -> Optional[Symbol]:
        """
        Consumes one bit.

        Returns:
            The decoded symbol if the bit completed a code, otherwise None.
        """
        leaf = self._step(bit)
        return leaf.symbol if leaf is not None else None

    def feed_bits(self, bits: Bits) -> List[Symbol]:
        decoded_data = []
        for bit in bits:
            leaf = self._step(bit)
            if leaf is not None:
                decoded_data.append(leaf.symbol)
        return decoded_data

    def finish(self) -> None:
        if not self.at_boundary:
            raise TruncatedStreamError("Bit stream ended in the middle of a code.")


def huffman_decode(encoded_data: Bits, root: HuffmanNode) -> List[Symbol]:
    decoder = HuffmanDecoder(root)
    decoded_data = decoder.feed_bits(encoded_data)
    decoder.finish()
    return decoded_data


class HuffmanEncoder(EntropyEncoder):
    def __init__(self, symbol_frequencies: Dict[Symbol, int], verbose: bool = False):
        """
        Initializes a Huffman Encoder.

        The tree and the codes are built once here and never change afterwards,
        so one encoder can be shared by any number of encode and decode calls.

        Parameters:
            symbol_frequencies (dict): Dictionary mapping symbols to their frequencies.
            verbose (bool): Print code statistics and show progress while coding.
        """
        self.symbol_frequencies = symbol_frequencies.copy()
        self.verbose = verbose

        self.huffman_tree: HuffmanNode = build_huffman_tree_from_frequencies(self.symbol_frequencies)
        self.huffman_codes: CodeTable = build_huffman_codes(self.huffman_tree)

        if self.verbose:
            print("HuffmanEncoder verbose statistics:")
            print(f"- Alphabet size: {len(self.huffman_codes)}")
            print(f"- Tree depth: {self.huffman_tree.depth()}")
            print(f"- Average code bit length: {self.average_code_length():.3f}")
            for leaf in self.huffman_tree.leaves():
                print(f"- Symbol {leaf.symbol!r} (weight {leaf.weight}): {self.huffman_codes[leaf.symbol]}")

    def average_code_length(self) -> float:
        return calculate_average_code_length(self.symbol_frequencies, self.huffman_codes)

    def encode(self, data: List[Symbol]) -> str:
        """
        Encodes a list of symbols using the Huffman codes.

        Parameters:
            data (list): List of symbols to encode.

        Returns:
            str: Encoded binary string.
        """
        return huffman_encode(tqdm(data, disable=not self.verbose), self.huffman_codes)

    def decode(self, encoded_data: Bits) -> List[Symbol]:
        """
        Decodes a binary string back into the original data using the Huffman tree.

        Parameters:
            encoded_data (str): Binary string to decode.

        Returns:
            list: Decoded list of symbols.
        """
        return huffman_decode(tqdm(encoded_data, disable=not self.verbose), self.huffman_tree)
