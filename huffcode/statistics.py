from dataclasses import dataclass, field
from typing import Dict, Mapping

# Bits per symbol of the uncoded input
REFERENCE_WIDTH = 8


@dataclass
class CodeStatistics:
    total_symbols: int
    bits_before: int
    bits_after: int
    # code length -> number of distinct symbols with that length
    length_counts: Dict[int, int] = field(default_factory=dict)
    # code length -> summed frequency of those symbols
    length_frequencies: Dict[int, int] = field(default_factory=dict)

    @property
    def ratio(self) -> float:
        """Encoded size as a percentage of the uncoded size."""
        if not self.bits_before:
            return 0.0
        return self.bits_after / self.bits_before * 100

    @property
    def max_code_length(self) -> int:
        return max(self.length_counts, default=0)


def statistics(freq: Mapping, codes: Mapping[object, str],
               reference_width: int = REFERENCE_WIDTH) -> CodeStatistics:
    """
    Summarises the code lengths and the size gained by encoding.

    Parameters:
    freq (Mapping): Symbol -> occurrence count.
    codes (Mapping): Symbol -> bit-string.
    reference_width (int): Bits per symbol before encoding.

    Returns:
    CodeStatistics: Per-length counts and frequencies, bits before and after.
    """
    if reference_width <= 0:
        raise ValueError("Reference width must be positive.")
    length_counts: Dict[int, int] = {}
    length_frequencies: Dict[int, int] = {}
    for symbol, code in codes.items():
        bits = len(code)
        length_counts[bits] = length_counts.get(bits, 0) + 1
        length_frequencies[bits] = length_frequencies.get(bits, 0) + freq[symbol]

    total = sum(freq.values())
    return CodeStatistics(
        total_symbols=total,
        bits_before=total * reference_width,
        bits_after=sum(freq[symbol] * len(code) for symbol, code in codes.items()),
        length_counts=dict(sorted(length_counts.items())),
        length_frequencies=dict(sorted(length_frequencies.items())),
    )
