import logging
from collections import Counter
from typing import List, Mapping, Optional, Tuple, Union

from bitarray import bitarray

from .alphabet import ASCII, Alphabet
from .codes import CodeMap, CodeOrder, assign_codes
from .errors import InvalidSymbolError, MalformedStreamError
from .frequency import count
from .tree import Node, build_tree

logger = logging.getLogger(__name__)


def encode(sequence, codes: Mapping[object, str]) -> bitarray:
    """
    Concatenates the code of every input symbol, in input order.

    Parameters:
    sequence: The original symbols.
    codes (Mapping): Symbol -> bit-string, as returned by assign_codes.

    Returns:
    bitarray: The encoded stream.
    """
    if not isinstance(sequence, (str, bytes, bytearray)):
        sequence = list(sequence)
    for position, symbol in enumerate(sequence):
        if symbol not in codes:
            raise InvalidSymbolError(symbol, position)
    table = {symbol: bitarray(code) for symbol, code in codes.items()}
    stream = bitarray(endian="big")
    stream.encode(table, sequence)
    logger.debug("Encoded %d symbols into %d bits", len(sequence), len(stream))
    return stream


def _as_bits(stream: Union[bitarray, str]) -> bitarray:
    if isinstance(stream, bitarray):
        return stream
    if not isinstance(stream, str):
        raise TypeError("Encoded stream must be a bitarray or a string of '0'/'1'.")
    for position, char in enumerate(stream):
        if char not in "01":
            raise MalformedStreamError(f"Unexpected character {char!r} in stream", position)
    return bitarray(stream)


def decode(root: Node, stream: Union[bitarray, str], length: Optional[int] = None) -> List:
    """
    Walks the tree bit by bit to recover the original symbols.

    Exactly `length` symbols are produced, defaulting to the root weight, which
    equals the number of symbols the tree was built from. Every bit of the
    stream must be consumed by those symbols.

    Parameters:
    root (Leaf | Internal): The tree the stream was encoded with.
    stream (bitarray | str): The encoded bits.
    length (int, optional): Number of symbols to decode.

    Returns:
    list: The decoded symbols.
    """
    bits = _as_bits(stream)
    expected = root.weight if length is None else length
    if expected < 0:
        raise ValueError("Symbol count cannot be negative.")

    total = len(bits)
    cursor = 0
    symbols = []
    for _ in range(expected):
        node = root
        if node.is_leaf:
            # One-symbol tree: every symbol is the single bit 0
            if cursor >= total:
                raise MalformedStreamError("Stream ends inside a code", cursor)
            if bits[cursor]:
                raise MalformedStreamError("Invalid code for a one-symbol tree", cursor)
            cursor += 1
        while not node.is_leaf:
            if cursor >= total:
                raise MalformedStreamError("Stream ends inside a code", cursor)
            node = node.right if bits[cursor] else node.left
            cursor += 1
        symbols.append(node.symbol)

    if cursor != total:
        raise MalformedStreamError(f"{total - cursor} trailing bits after the last symbol", cursor)
    return symbols


class HuffmanCompressor:
    def __init__(self, alphabet: Alphabet = ASCII):
        self.alphabet = alphabet

    def build_tree(self, text) -> Node:
        """
        Counts the symbols of the text and builds its Huffman tree.

        Parameters:
        text (str): The text to analyse.

        Returns:
        Leaf | Internal: The tree root.
        """
        return build_tree(count(text, self.alphabet))

    def build_codebook(self, text) -> Tuple[Counter, Node, CodeMap, CodeOrder]:
        """
        Runs every stage needed before encoding: count, build, assign.

        Parameters:
        text (str): The text to analyse.

        Returns:
        tuple: The frequencies, the tree root, the code map and the
        frequency-ordered code listing.
        """
        freq = count(text, self.alphabet)
        tree = build_tree(freq)
        codes, order = assign_codes(tree, freq)
        return freq, tree, codes, order

    def encode(self, text, codes: CodeMap) -> bitarray:
        return encode(text, codes)

    def compress(self, text: str) -> Tuple[bitarray, Node]:
        """
        Compresses the text with a tree built from its own frequencies.

        Parameters:
        text (str): The text to compress.

        Returns:
        tuple: The encoded bitarray and the tree needed to decode it.
        """
        _, tree, codes, _ = self.build_codebook(text)
        return self.encode(text, codes), tree

    def decompress(self, compressed: Union[bitarray, str], tree: Node,
                   length: Optional[int] = None) -> str:
        """
        Decompresses a bitarray produced by compress back to text.

        Parameters:
        compressed (bitarray): Compressed binary data.
        tree (Leaf | Internal): The tree returned alongside it.
        length (int, optional): Number of characters to decode.

        Returns:
        str: The decompressed text.
        """
        return "".join(decode(tree, compressed, length))
