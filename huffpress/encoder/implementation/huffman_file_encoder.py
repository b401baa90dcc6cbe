from ...utils.types import CompressedData, Document
from ...utils.bit_magic import bytes_to_bitstream, extend_bytearray_with_bitstream
from ...utils.errors import CorruptStreamError, InvalidInputError
from ...utils.huffman_tree import build_huffman_codes, build_huffman_tree_from_frequencies
from ...utils.entropy_encoders.huffman_encoder import huffman_decode, huffman_encode
from ..encoder import Encoder, Packing
import struct

HEADER_FORMAT = '<IIQ'
ENTRY_FORMAT = '<BQ'
MAX_SYMBOL = 0xFF
MAX_WEIGHT = 2 ** 64 - 1


class HuffmanFileEncoder(Encoder):
    """
    Stores a document as its frequency table followed by the Huffman coded payload.

    The tree itself is never written. The decoder rebuilds it from the stored
    table, whose entries keep their original order, so the rebuilt tree is
    identical to the one used for encoding.

    Layout (little endian):
        I packing, I table entries, Q payload bits,
        then per entry B symbol and Q weight, then the payload.
    """

    def __init__(self, packing: Packing = Packing.BYTES, verbose=False):
        self.packing: Packing = packing
        self.verbose = verbose

    def encode(self, document: Document) -> CompressedData:
        # Zero weights carry no leaf, negative ones are rejected by tree building
        frequencies = {symbol: weight for symbol, weight in document.frequencies.items() if weight != 0}
        for symbol, weight in frequencies.items():
            if not isinstance(symbol, int) or not 0 <= symbol <= MAX_SYMBOL:
                raise InvalidInputError(f"Symbol {symbol!r} does not fit in one byte.")
            if weight > MAX_WEIGHT:
                raise InvalidInputError(f"Weight {weight} of symbol {symbol} does not fit in 64 bits.")

        if frequencies:
            root = build_huffman_tree_from_frequencies(frequencies)
            bitstream = huffman_encode(document.symbols, build_huffman_codes(root))
        else:
            bitstream = ""

        byte_array = bytearray()
        byte_array.extend(struct.pack(HEADER_FORMAT, self.packing, len(frequencies), len(bitstream)))
        for symbol, weight in frequencies.items():
            byte_array.extend(struct.pack(ENTRY_FORMAT, symbol, weight))

        if self.verbose:
            print("HuffmanFileEncoder verbose statistics:")
            print(f"- Header (in bytes): {len(byte_array)}")

        len_before_payload = len(byte_array)

        match self.packing:
            case Packing.BITSTRING:
                byte_array.extend(bitstream.encode("ascii"))
            case Packing.BYTES:
                extend_bytearray_with_bitstream(byte_array, bitstream)
            case _:
                raise NotImplementedError(f"Packing {self.packing!r} is not supported.")

        bits_per_symbol = len(bitstream) / len(document.symbols) if len(document.symbols) else 0.0

        if self.verbose:
            print(f"- Payload (in bytes): {len(byte_array) - len_before_payload}")
            print(f"- Average code bit length: {bits_per_symbol:.3f}")

        return CompressedData(bytes(byte_array), len(bitstream), bits_per_symbol)

    def decode(self, data: bytes) -> bytes:
        try:
            packing, entries, bit_count = struct.unpack_from(HEADER_FORMAT, data, 0)
            offset = struct.calcsize(HEADER_FORMAT)

            frequencies = {}
            for _ in range(entries):
                symbol, weight = struct.unpack_from(ENTRY_FORMAT, data, offset)
                offset += struct.calcsize(ENTRY_FORMAT)
                if weight == 0:
                    raise CorruptStreamError(f"Symbol {symbol} is stored with zero weight.")
                if symbol in frequencies:
                    raise CorruptStreamError(f"Symbol {symbol} is stored more than once.")
                frequencies[symbol] = weight
        except struct.error as e:
            raise CorruptStreamError(f"Container header is truncated: {e}") from e

        payload = data[offset:]

        match packing:
            case Packing.BITSTRING:
                if len(payload) != bit_count:
                    raise CorruptStreamError(f"Expected {bit_count} payload bits, found {len(payload)}.")
                bitstream = payload.decode("latin-1")
            case Packing.BYTES:
                if len(payload) != (bit_count + 7) // 8:
                    raise CorruptStreamError(f"Expected {(bit_count + 7) // 8} payload bytes, found {len(payload)}.")
                bitstream = bytes_to_bitstream(payload, bit_count)
            case _:
                raise CorruptStreamError(f"Unknown packing {packing}.")

        if not frequencies:
            if bit_count:
                raise CorruptStreamError("Payload present without a frequency table.")
            return b""

        root = build_huffman_tree_from_frequencies(frequencies)
        return bytes(huffman_decode(bitstream, root))
