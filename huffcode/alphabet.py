import logging
from typing import Callable, Iterable, Optional

from .errors import InvalidSymbolError

logger = logging.getLogger(__name__)


def _is_ascii(symbol) -> bool:
    if isinstance(symbol, int):
        return 0 <= symbol < 128
    return isinstance(symbol, str) and len(symbol) == 1 and symbol.isascii()


class Alphabet:
    # Named alphabets selectable from config.yaml
    VALID_NAMES = {'ascii', 'charset', 'any'}

    def __init__(self, predicate: Callable[[object], bool], name: str = 'custom'):
        """
        Wraps a predicate deciding which symbols may be coded.

        Parameters:
        predicate (callable): Returns True for accepted symbols.
        name (str): Label used in log messages.
        """
        self.predicate = predicate
        self.name = name

    @classmethod
    def from_charset(cls, charset: Iterable) -> "Alphabet":
        allowed = frozenset(charset)
        return cls(allowed.__contains__, name='charset')

    @classmethod
    def from_config(cls, config: dict) -> "Alphabet":
        """
        Builds the alphabet described by the `alphabet` section of the config.

        Parameters:
        config (dict): The `alphabet` section, e.g. {"name": "ascii"}.

        Returns:
        Alphabet: The matching alphabet.
        """
        name = str(config.get("name", "ascii")).lower()
        if name not in cls.VALID_NAMES:
            raise ValueError(f"Unsupported alphabet: {name}")
        if name == 'charset':
            charset: Optional[str] = config.get("charset")
            if not charset:
                raise ValueError("The charset alphabet needs a non-empty 'charset' entry")
            return cls.from_charset(charset)
        if name == 'any':
            return ANY
        return ASCII

    def accepts(self, symbol) -> bool:
        return bool(self.predicate(symbol))

    def validate(self, sequence) -> None:
        """
        Checks every symbol, failing on the first one outside the alphabet.

        Parameters:
        sequence: The input symbols.

        Raises:
        InvalidSymbolError: If any symbol is rejected.
        """
        for position, symbol in enumerate(sequence):
            if not self.predicate(symbol):
                logger.warning("Rejected symbol %r at position %d (%s alphabet)",
                               symbol, position, self.name)
                raise InvalidSymbolError(symbol, position)

    def __repr__(self) -> str:
        return f"Alphabet({self.name!r})"


ASCII = Alphabet(_is_ascii, name='ascii')
ANY = Alphabet(lambda symbol: True, name='any')
