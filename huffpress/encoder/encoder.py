from abc import ABC, abstractmethod
from ..utils.types import CompressedData, Document
from enum import IntEnum


class Packing(IntEnum):
    BITSTRING = 0
    BYTES = 1


class Encoder(ABC):
    @abstractmethod
    def encode(self, document: Document) -> CompressedData:
        ...

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        ...
