from .board import Board, BOARD_COLS, BOARD_ROWS, Status
from .dictionary import Dictionary, DictionaryError, load_dictionary
from .session import Session, create

__version__ = "0.1.0"

__all__ = [
    "Board", "BOARD_COLS", "BOARD_ROWS", "Status",
    "Dictionary", "DictionaryError", "load_dictionary",
    "Session", "create",
]
