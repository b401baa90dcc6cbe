class HuffmanError(Exception):
    """Base class for every failure raised while building or using a Huffman code."""


class InvalidInputError(HuffmanError, ValueError):
    """Frequency table is empty or holds a negative weight."""


class EmptyQueueError(HuffmanError, IndexError):
    """Extraction attempted on an empty priority queue."""


class UnknownSymbolError(HuffmanError, KeyError):
    """Symbol has no code in the table it is being encoded with."""

    def __init__(self, symbol):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self):
        return f"Symbol {self.symbol!r} is not present in the code table."


class CorruptStreamError(HuffmanError, ValueError):
    """Bit stream holds an invalid bit or walks past a missing child."""


class TruncatedStreamError(HuffmanError, ValueError):
    """Bit stream ended in the middle of a code."""
