from typing import Dict, List, Sequence, Tuple

from .bit_magic import count_frequencies
from .errors import InvalidInputError
from .priority_queue import PriorityQueue
from .types import CodeTable, HuffmanNode, Symbol


def make_leaves(frequencies: Dict[Symbol, int]) -> List[HuffmanNode]:
    leaves = []
    for symbol, weight in frequencies.items():
        if weight < 0:
            raise InvalidInputError(f"Symbol {symbol!r} has negative weight {weight}.")
        if weight > 0:
            leaves.append(HuffmanNode(weight, symbol))
    return leaves


def build_huffman_tree(leaves: Sequence[HuffmanNode]) -> HuffmanNode:
    """
    Builds a Huffman tree bottom-up from the given leaves.

    Parameters:
        leaves (list): Leaf nodes, one per distinct symbol. Their order decides
            how equal weights are broken: earlier leaves are merged first.

    Returns:
        HuffmanNode: Root of the tree. A single leaf is returned as the root itself.
    """
    if len(leaves) == 0:
        raise InvalidInputError("Cannot build a Huffman tree without any symbols.")

    queue = PriorityQueue()
    for leaf in leaves:
        queue.insert(leaf)

    # Combine nodes until there is only one root node
    while len(queue) > 1:
        left = queue.extract_min()
        right = queue.extract_min()
        queue.insert(HuffmanNode(left.weight + right.weight, left=left, right=right))

    return queue.extract_min()


def build_huffman_tree_from_frequencies(frequencies: Dict[Symbol, int]) -> HuffmanNode:
    return build_huffman_tree(make_leaves(frequencies))


def build_huffman_codes(root: HuffmanNode) -> CodeTable:
    """
    Derives the code of every symbol from the root-to-leaf paths of the tree.

    Left edges are written as "0", right edges as "1". A tree made of a single
    leaf has no edges, so its symbol gets the one-bit code "0".
    """
    if root.is_leaf:
        return {root.symbol: "0"}

    codes: CodeTable = {}
    path: List[str] = []

    def generate_codes(node: HuffmanNode):
        if node.is_leaf:
            codes[node.symbol] = ''.join(path)
            return

        path.append("0")
        generate_codes(node.left)
        path.pop()

        path.append("1")
        generate_codes(node.right)
        path.pop()

    generate_codes(root)
    return codes


def calculate_huffman_codes(data: Sequence[Symbol]) -> Tuple[Dict[Symbol, int], HuffmanNode, CodeTable]:
    # Calculate frequencies
    frequencies = count_frequencies(data)

    # Build Huffman Tree
    root = build_huffman_tree_from_frequencies(frequencies)

    # Build Huffman Codes
    huffman_codes = build_huffman_codes(root)

    return frequencies, root, huffman_codes
