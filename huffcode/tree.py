import logging
from heapq import heapify, heappop, heappush
from itertools import count as sequence_numbers
from typing import Iterator, Mapping, Union

from .errors import EmptyAlphabetError

logger = logging.getLogger(__name__)


class Leaf:
    __slots__ = ("symbol", "weight")

    def __init__(self, symbol, weight: int):
        self.symbol = symbol
        self.weight = weight

    @property
    def is_leaf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Leaf({self.symbol!r}, {self.weight})"


class Internal:
    # Each child is owned by this node only; the tree holds no shared or cyclic links.
    __slots__ = ("left", "right", "weight")

    def __init__(self, left: "Node", right: "Node"):
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight

    @property
    def is_leaf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Internal({self.weight}, {self.left!r}, {self.right!r})"


Node = Union[Leaf, Internal]


def build_tree(freq: Mapping) -> Node:
    """
    Builds a Huffman tree by repeatedly merging the two lightest nodes.

    Equal weights are broken by insertion order: leaves enter in the mapping's
    iteration order and every merged node gets the next sequence number. The
    first node taken from the queue becomes the left child.

    Parameters:
    freq (Mapping): Symbol -> occurrence count.

    Returns:
    Leaf | Internal: The root. A single-symbol mapping yields a Leaf root.
    """
    if not freq:
        raise EmptyAlphabetError()

    order = sequence_numbers()
    heap = [(weight, next(order), Leaf(symbol, weight)) for symbol, weight in freq.items()]
    heapify(heap)

    while len(heap) > 1:
        _, _, left = heappop(heap)
        _, _, right = heappop(heap)
        merged = Internal(left, right)
        heappush(heap, (merged.weight, next(order), merged))

    root = heap[0][2]
    logger.debug("Built tree over %d symbols, root weight %d", len(freq), root.weight)
    return root


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yields every node of the tree in depth-first, left-first order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if not node.is_leaf:
            stack.append(node.right)
            stack.append(node.left)
