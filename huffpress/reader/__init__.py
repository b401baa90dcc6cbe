from .reader import Reader
from .implementation.bytes_reader import BytesReader
