import logging
from typing import Dict, List, Mapping, Optional, Tuple

from .tree import Node

logger = logging.getLogger(__name__)

# Code given to the only symbol of a one-symbol alphabet, whose tree has no edges.
SINGLE_SYMBOL_CODE = "0"

CodeMap = Dict[object, str]
CodeOrder = List[Tuple[object, str]]


def assign_codes(root: Node, freq: Optional[Mapping] = None) -> Tuple[CodeMap, CodeOrder]:
    """
    Walks the tree and gives every leaf the path leading to it.

    A left edge appends '0' and a right edge appends '1'. When the root is
    itself a leaf it is given SINGLE_SYMBOL_CODE, since an empty code could
    not be told apart from no symbol at all when decoding.

    Parameters:
    root (Leaf | Internal): Root of a tree from build_tree.
    freq (Mapping, optional): Symbol counts used to sort the listing. The leaf
        weights are used when omitted.

    Returns:
    tuple: The code map (symbol -> bit-string) and the (symbol, bit-string)
    listing sorted by ascending frequency.
    """
    codes: CodeMap = {}
    order: CodeOrder = []
    weights = {}

    if root.is_leaf:
        codes[root.symbol] = SINGLE_SYMBOL_CODE
        order.append((root.symbol, SINGLE_SYMBOL_CODE))
        weights[root.symbol] = root.weight
    else:
        stack = [(root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = prefix
                order.append((node.symbol, prefix))
                weights[node.symbol] = node.weight
                continue
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))

    if freq is not None:
        weights = freq
    # Stable sort: ties keep traversal order. Presentation only, codes is untouched.
    order.sort(key=lambda pair: weights[pair[0]])
    logger.debug("Assigned %d codes", len(codes))
    return codes, order
