import pytest
from wordlehelp.board import Board, BOARD_COLS, BOARD_ROWS, Status


def _type(board, word):
    for ch in word:
        assert board.add(ch) is True


def test_new_board_is_empty():
    b = Board()
    snap = b.snapshot()
    assert len(snap) == BOARD_ROWS * BOARD_COLS
    assert all(v.status == 0 and v.letter is None for v in snap)
    assert b.cursor == (0, 0)
    assert b.is_empty() and not b.is_full()


def test_add_uppercases_and_marks_incorrect():
    b = Board()
    assert b.add("c") is True
    assert b.snapshot()[0] == (1, "C")
    assert b.cell(0, 0).status is Status.INCORRECT
    assert b.cursor == (0, 1)


@pytest.mark.parametrize("bad", ["", "ab", "1", "é", " ", None, 65])
def test_add_rejects_non_letters(bad):
    b = Board()
    assert b.add(bad) is False
    assert b.is_empty()


def test_filling_a_row_moves_cursor_to_next_row():
    b = Board()
    _type(b, "crane")
    assert b.cursor == (1, 0)
    assert b.row_word(0) == "CRANE"
    assert len(b.locked_rows()) == 1


def test_add_on_full_board_is_noop():
    b = Board()
    _type(b, "abcde" * BOARD_ROWS)
    assert b.is_full()
    before = (b.snapshot(), b.cursor)
    assert b.add("z") is False
    assert (b.snapshot(), b.cursor) == before


def test_remove_on_empty_board_is_noop():
    b = Board()
    assert b.remove() is False
    assert b.is_empty() and b.cursor == (0, 0)


def test_remove_rewinds_across_rows():
    b = Board()
    _type(b, "craneS")
    assert b.cursor == (1, 1)
    assert b.remove() is True
    assert b.cursor == (1, 0)
    assert b.cell(1, 0).status is Status.EMPTY
    assert b.remove() is True
    assert b.cursor == (0, 4)
    assert b.cell(0, 4).letter is None and b.cell(0, 4).status is Status.EMPTY
    assert b.row_word(0) == "CRAN"
    assert b.locked_rows() == []


def test_toggle_cycles_with_period_three():
    b = Board()
    _type(b, "c")
    seen = []
    for _ in range(6):
        assert b.toggle(0, 0) is True
        seen.append(b.cell(0, 0).status)
    assert seen == [Status.PRESENT, Status.CORRECT, Status.INCORRECT] * 2


def test_toggle_empty_or_out_of_range_is_noop():
    b = Board()
    _type(b, "c")
    assert b.toggle(0, 1) is False
    assert b.cell(0, 1).status is Status.EMPTY
    for row, col in [(-1, 0), (BOARD_ROWS, 0), (0, -1), (0, BOARD_COLS)]:
        assert b.toggle(row, col) is False


def test_toggle_column_targets_row_being_edited():
    b = Board()
    assert b.toggle_column(0) is False  # nothing typed yet

    _type(b, "crane")
    # row 0 is complete; it is still the row being edited
    assert b.toggle_column(4) is True
    assert b.cell(0, 4).status is Status.PRESENT

    _type(b, "s")
    assert b.toggle_column(0) is True
    assert b.cell(1, 0).status is Status.PRESENT
    assert b.toggle_column(1) is False  # no letter there yet
    assert b.toggle_column(BOARD_COLS) is False
    assert b.cell(0, 0).status is Status.INCORRECT


def test_snapshot_does_not_mutate():
    b = Board()
    _type(b, "cr")
    assert b.snapshot() == b.snapshot()
    assert b.cursor == (0, 2)


def test_to_bytes_layout():
    b = Board()
    _type(b, "cr")
    b.toggle(0, 1)
    raw = b.to_bytes()
    assert len(raw) == 2 * BOARD_ROWS * BOARD_COLS
    assert raw[:6] == bytes([1, ord("C"), 2, ord("R"), 0, 0])


# --- opt-in hint propagation ---

def test_propagate_carries_marks_into_new_rows():
    b = Board(propagate=True)
    _type(b, "crane")
    b.toggle(0, 2)
    b.toggle(0, 2)
    assert b.cell(0, 2).status is Status.CORRECT
    _type(b, "slate")
    assert b.cell(1, 2).status is Status.CORRECT
    assert b.cell(1, 0).status is Status.INCORRECT


def test_propagate_allows_one_green_per_column():
    b = Board(propagate=True)
    _type(b, "crane")
    b.toggle(0, 2)
    b.toggle(0, 2)
    _type(b, "bloat")
    assert b.toggle(1, 2) is True
    assert b.cell(1, 2).status is Status.PRESENT
    assert b.toggle(1, 2) is True
    assert b.cell(1, 2).status is Status.INCORRECT


def test_propagate_mirrors_toggle_to_same_letter_in_column():
    b = Board(propagate=True)
    _type(b, "crane")
    _type(b, "crisp")
    b.toggle(1, 0)
    assert b.cell(1, 0).status is Status.PRESENT
    assert b.cell(0, 0).status is Status.PRESENT


def test_default_board_does_not_mirror():
    b = Board()
    _type(b, "crane")
    _type(b, "crisp")
    b.toggle(1, 0)
    assert b.cell(0, 0).status is Status.INCORRECT


def test_set_status_writes_one_cell_only():
    b = Board(propagate=True)
    _type(b, "crane")
    b.toggle(0, 2)
    assert b.cell(0, 2).status is Status.PRESENT
    _type(b, "bloat")
    assert b.cell(1, 2).status is Status.PRESENT  # carried from row 0
    assert b.set_status(1, 2, Status.INCORRECT) is True
    assert b.cell(1, 2).status is Status.INCORRECT
    assert b.cell(0, 2).status is Status.PRESENT


def test_set_status_refuses_empty_cells_and_empty_status():
    b = Board()
    _type(b, "cr")
    assert b.set_status(0, 0, Status.EMPTY) is False
    assert b.set_status(0, 2, Status.CORRECT) is False
    assert b.set_status(6, 0, Status.CORRECT) is False
    assert b.cell(0, 0).status is Status.INCORRECT
    assert b.set_status(0, 1, Status.CORRECT) is True
