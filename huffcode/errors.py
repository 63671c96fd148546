class HuffmanError(ValueError):
    """Base class for every failure raised while coding a sequence."""


class InvalidSymbolError(HuffmanError):
    def __init__(self, symbol, position: int) -> None:
        """
        Raised when the input holds a symbol outside the accepted alphabet.

        Parameters:
        symbol: The offending symbol.
        position (int): Its index in the input sequence.
        """
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unsupported symbol {symbol!r} at position {position}")


class EmptyAlphabetError(HuffmanError):
    def __init__(self, message: str = "Cannot build a Huffman tree from an empty input") -> None:
        super().__init__(message)


class MalformedStreamError(HuffmanError):
    def __init__(self, message: str, position: int) -> None:
        """
        Raised when an encoded stream cannot be walked back to its symbols.

        Parameters:
        message (str): What went wrong.
        position (int): Bit offset at which decoding stopped.
        """
        self.position = position
        super().__init__(f"{message} (bit {position})")
