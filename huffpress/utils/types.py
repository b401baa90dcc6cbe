from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Union, TypeAlias

Symbol: TypeAlias = Union[str, int]
Bit: TypeAlias = Union[str, int]
Bits: TypeAlias = Iterable[Bit]
CodeTable: TypeAlias = Dict[Symbol, str]


@dataclass(eq=False)
class HuffmanNode:
    weight: int = 0
    symbol: Optional[Symbol] = None
    left: Optional['HuffmanNode'] = None
    right: Optional['HuffmanNode'] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def depth(self) -> int:
        if self.is_leaf:
            return 0
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self):
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                # right pushed first so leaves come out left to right
                stack.append(node.right)
                stack.append(node.left)


@dataclass
class Document:
    symbols: bytes = b""
    frequencies: Dict[int, int] = field(default_factory=dict)


@dataclass
class CompressedData:
    data: bytes
    bits: int
    bits_per_symbol: float
