import heapq
from itertools import count
from typing import List, Tuple

from .errors import EmptyQueueError
from .types import HuffmanNode


class PriorityQueue:
    """
    Min-priority queue of Huffman nodes keyed by weight.

    Entries with equal weight leave the queue in the order they were inserted:
    every entry carries a monotonically increasing sequence number as its
    secondary key, so the heap never has to compare the nodes themselves.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, HuffmanNode]] = []
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def insert(self, node: HuffmanNode) -> None:
        heapq.heappush(self._heap, (node.weight, next(self._counter), node))

    def extract_min(self) -> HuffmanNode:
        if not self._heap:
            raise EmptyQueueError("Cannot extract from an empty priority queue.")
        _, _, node = heapq.heappop(self._heap)
        return node

    def peek_min(self) -> HuffmanNode:
        if not self._heap:
            raise EmptyQueueError("Cannot peek into an empty priority queue.")
        return self._heap[0][2]
