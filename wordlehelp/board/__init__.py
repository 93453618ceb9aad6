from .cell import Cell, CellView, RENDER_CODES, Status, next_status
from .board import Board, BOARD_COLS, BOARD_ROWS

__all__ = [
    "Board", "BOARD_COLS", "BOARD_ROWS",
    "Cell", "CellView", "RENDER_CODES", "Status", "next_status",
]
