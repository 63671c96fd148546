import logging
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from bitarray import bitarray

from .alphabet import ASCII, Alphabet
from .codes import CodeMap, CodeOrder
from .errors import HuffmanError
from .huffman import HuffmanCompressor
from .statistics import REFERENCE_WIDTH, CodeStatistics, statistics
from .tree import Node

logger = logging.getLogger(__name__)


@dataclass
class HuffmanResult:
    text: str
    freq: Counter
    tree: Node
    codes: CodeMap
    order: CodeOrder
    encoded: bitarray
    decoded: str
    stats: CodeStatistics


class Compressor:
    # Compression block: runs the whole Huffman pipeline on one text, from
    # counting symbols to decoding the encoded stream again. The input is
    # plain text and the output is a HuffmanResult holding every stage.
    def __init__(self, alphabet: Alphabet = ASCII, reference_width: int = REFERENCE_WIDTH):
        """
        Initializes the Compressor.

        Parameters:
        alphabet (Alphabet): Symbols accepted in the input.
        reference_width (int): Bits per symbol of the uncoded input.
        """
        if isinstance(reference_width, bool) or not isinstance(reference_width, int):
            raise ValueError(f"Reference width must be an integer, got {reference_width!r}")
        if reference_width <= 0:
            raise ValueError("Reference width must be positive.")
        self.alphabet = alphabet
        self.reference_width = reference_width
        self.logic = HuffmanCompressor(alphabet)

    @classmethod
    def from_config(cls, config: dict) -> "Compressor":
        return cls(
            alphabet=Alphabet.from_config(config.get("alphabet") or {}),
            reference_width=(config.get("statistics") or {}).get("reference_width", REFERENCE_WIDTH),
        )

    def compress(self, plaintext: str) -> HuffmanResult:
        """
        Compresses the plaintext and decodes it again to confirm the round trip.

        Parameters:
        plaintext (str): The text to compress.

        Returns:
        HuffmanResult: Frequencies, tree, codes, encoded and decoded text, statistics.
        """
        if not isinstance(plaintext, str):
            raise TypeError("Input plaintext must be a string.")

        freq, tree, codes, order = self.logic.build_codebook(plaintext)
        encoded = self.logic.encode(plaintext, codes)
        decoded = self.decompress(encoded, tree)

        # A single mismatch means the coder is broken, not the input.
        if decoded != plaintext:
            raise HuffmanError("Round trip failed: decoded text differs from the input")

        stats = statistics(freq, codes, self.reference_width)
        logger.info("Encoded %d bits into %d bits (%.2f%%)",
                    stats.bits_before, stats.bits_after, stats.ratio)
        return HuffmanResult(
            text=plaintext,
            freq=freq,
            tree=tree,
            codes=codes,
            order=order,
            encoded=encoded,
            decoded=decoded,
            stats=stats,
        )

    def decompress(self, compressed: bitarray, tree: Node, length: Optional[int] = None) -> str:
        """
        Decompresses the given binary data using the tree it was encoded with.

        Parameters:
        compressed (bitarray): Compressed binary data.
        tree (Leaf | Internal): The Huffman tree.
        length (int, optional): Number of characters to decode.

        Returns:
        str: Decompressed text.
        """
        if not isinstance(compressed, bitarray):
            raise TypeError("Input compressed data must be a bitarray.")
        return self.logic.decompress(compressed, tree, length)
