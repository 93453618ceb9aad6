from .words import Dictionary, DictionaryError, load_dictionary
from .validator import WORD_LENGTH, validate_wordlist, pretty_summary, scan_wordlist
from .io import read_lines, write_lines

__all__ = [
    "Dictionary", "DictionaryError", "load_dictionary",
    "WORD_LENGTH", "validate_wordlist", "pretty_summary", "scan_wordlist",
    "read_lines", "write_lines",
]
