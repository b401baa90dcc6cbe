from ..reader import Reader, Document
from collections import Counter


class BytesReader(Reader):
    def __init__(self, verbose=False):
        self.verbose = verbose

    def read(self, path: str) -> Document:
        with open(path, "rb") as f:
            data = f.read()
        return self.read_bytes(data)

    def read_bytes(self, data: bytes) -> Document:
        counts = Counter(data)

        # Ascending byte order keeps the leaf order independent of the content layout
        frequencies = {byte: counts[byte] for byte in range(256) if counts[byte] > 0}

        if self.verbose:
            print("BytesReader verbose statistics:")
            print(f"- Bytes read: {len(data)}")
            print(f"- Distinct bytes: {len(frequencies)}")
            for byte, frequency in frequencies.items():
                print(f"- Byte {byte} ({chr(byte)!r}): {frequency}")

        return Document(bytes(data), frequencies)
