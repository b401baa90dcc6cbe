from .encoder import Encoder, Packing
from .implementation.huffman_file_encoder import HuffmanFileEncoder
