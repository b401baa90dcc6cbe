from .entropy_encoder import EntropyEncoder
from .huffman_encoder import HuffmanDecoder, HuffmanEncoder, huffman_decode, huffman_encode
