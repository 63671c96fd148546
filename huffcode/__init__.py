from .alphabet import ANY, ASCII, Alphabet
from .codes import SINGLE_SYMBOL_CODE, assign_codes
from .compression import Compressor, HuffmanResult
from .errors import EmptyAlphabetError, HuffmanError, InvalidSymbolError, MalformedStreamError
from .frequency import count
from .huffman import HuffmanCompressor, decode, encode
from .statistics import CodeStatistics, statistics
from .tree import Internal, Leaf, build_tree, iter_nodes

__version__ = "0.1.0"
