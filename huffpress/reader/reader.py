from abc import ABC, abstractmethod
from ..utils.types import Document


class Reader(ABC):
    @abstractmethod
    def read(self, path: str) -> Document:
        ...

    @staticmethod
    def read_from_file(path: str) -> Document:
        from .implementation.bytes_reader import BytesReader
        return BytesReader().read(path)
