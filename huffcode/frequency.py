import logging
from collections import Counter

from .alphabet import ASCII, Alphabet

logger = logging.getLogger(__name__)


def count(sequence, alphabet: Alphabet = ASCII) -> Counter:
    """
    Counts how often each symbol occurs in the input.

    The whole sequence is validated before anything is counted, so a rejected
    input never yields a partial mapping.

    Parameters:
    sequence: The input symbols (a str in the usual case).
    alphabet (Alphabet): Decides which symbols are accepted.

    Returns:
    Counter: Symbol -> occurrence count, in order of first occurrence.
    """
    if isinstance(sequence, (str, bytes, bytearray)):
        symbols = sequence
    else:
        symbols = list(sequence)
    alphabet.validate(symbols)
    freq = Counter(symbols)
    logger.info("Total number of characters: %d", len(symbols))
    return freq
