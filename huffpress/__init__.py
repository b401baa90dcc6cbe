from .utils.types import CodeTable, CompressedData, Document, HuffmanNode, Symbol
from .utils.errors import (
    CorruptStreamError,
    EmptyQueueError,
    HuffmanError,
    InvalidInputError,
    TruncatedStreamError,
    UnknownSymbolError,
)
from .utils.priority_queue import PriorityQueue
from .utils.huffman_tree import (
    build_huffman_codes,
    build_huffman_tree,
    build_huffman_tree_from_frequencies,
    calculate_huffman_codes,
    make_leaves,
)
from .utils.entropy_encoders import HuffmanDecoder, HuffmanEncoder, huffman_decode, huffman_encode
