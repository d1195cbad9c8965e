# c4search/core/board.py
import logging
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from .constants import CONNECT, WIN_SCORE, LOSS_SCORE, DRAW_SCORE
from .errors import OutOfBoundsError, InvalidBoardError

logger = logging.getLogger(__name__)


class Player(IntEnum):
    P1 = 1
    EMPTY = 0
    P2 = -1

    # A drawn game has no winner: same marker as an empty cell
    DRAW = 0

    def switch(self) -> "Player":
        if self is Player.P1:
            return Player.P2
        if self is Player.P2:
            return Player.P1
        return Player.EMPTY

    @property
    def score(self) -> float:
        """Terminal value from P1's point of view."""
        if self is Player.P1:
            return WIN_SCORE
        if self is Player.P2:
            return LOSS_SCORE
        return DRAW_SCORE


SYMBOLS = {Player.EMPTY: ".", Player.P1: "X", Player.P2: "O"}


def _clamp(a: int, bound: int) -> int:
    if a < 0:
        return 0
    if a >= bound:
        return bound
    return a


def find_bounds(a: int, bound: int, length: int = CONNECT) -> Tuple[int, int]:
    """
    Start positions of every `length`-long window on an axis of size `bound`
    that contains position `a`. Returns (start, end) with end exclusive.
    """
    diff = length - 1
    earliest = _clamp(a - diff, bound - 1)
    latest = _clamp(_clamp(a + diff, bound - 1) - diff + 1, bound - 1)
    return earliest, latest


class BoardState:
    """
    Gravity grid, row 0 is the BOTTOM of the board.
    Cells are stored row-major, column-fastest: index = row * width + column.
    """

    def __init__(self, cells: List[Player], turn_number: int, width: int, height: int):
        self.cells = cells
        self.turn_number = turn_number
        self.width = width
        self.height = height
        # Memoized "is the game decided" for the most recent move
        self.cached_terminal: Optional[bool] = None

    @classmethod
    def empty(cls, width: int, height: int) -> "BoardState":
        return cls.from_int_array([0] * (width * height), width, height)

    @classmethod
    def from_int_array(cls, values: Sequence[int], width: int, height: int) -> "BoardState":
        """
        Builds a board from a flat list of ints, bottom row first.
        Positive = P1, negative = P2, zero = empty.
        The turn number is the count of occupied cells.
        """
        if width <= 0 or height <= 0:
            raise InvalidBoardError(f"Board dimensions must be positive, got {width}x{height}")
        if len(values) != width * height:
            raise InvalidBoardError(
                f"Expected {width * height} cells for a {width}x{height} board, got {len(values)}"
            )

        cells = []
        turn_number = 0
        for value in values:
            if value > 0:
                cells.append(Player.P1)
                turn_number += 1
            elif value < 0:
                cells.append(Player.P2)
                turn_number += 1
            else:
                cells.append(Player.EMPTY)

        return cls(cells, turn_number, width, height)

    def to_int_array(self) -> List[int]:
        return [int(cell) for cell in self.cells]

    def copy(self) -> "BoardState":
        return BoardState(list(self.cells), self.turn_number, self.width, self.height)

    # --- Cell access ---

    def _check_bounds(self, column: int, row: int, action: str):
        if not (0 <= column < self.width and 0 <= row < self.height):
            message = (
                f"Cell ({column}, {row}) outside {self.width}x{self.height} board, in {action}"
            )
            logger.error(message)
            raise OutOfBoundsError(message)

    def read(self, column: int, row: int) -> Player:
        self._check_bounds(column, row, "read")
        return self.cells[row * self.width + column]

    def read_checked(self, column: int, row: int) -> Optional[Player]:
        """Like read(), but returns None off the grid. Used by edge scans."""
        if column < 0 or row < 0 or column >= self.width or row >= self.height:
            return None
        return self.cells[row * self.width + column]

    def write(self, column: int, row: int, player: Player):
        """Direct in-place write, for setting up positions. Not a move."""
        self._check_bounds(column, row, "write")
        index = row * self.width + column
        previous = self.cells[index]
        if previous == Player.EMPTY and player != Player.EMPTY:
            self.turn_number += 1
        elif previous != Player.EMPTY and player == Player.EMPTY:
            self.turn_number -= 1
        self.cells[index] = player
        self.cached_terminal = None

    # --- Moves ---

    def column_floor(self, column: int) -> int:
        """Landing row: one above the highest occupied cell of the column."""
        for row in range(self.height - 1, -1, -1):
            if self.read(column, row) != Player.EMPTY:
                return row + 1
        return 0

    def can_play(self, column: int) -> bool:
        return self.column_floor(column) < self.height

    def legal_columns(self) -> List[int]:
        return [c for c in range(self.width) if self.can_play(c)]

    def is_full(self) -> bool:
        return self.turn_number >= self.width * self.height

    def apply_move(self, column: int, player: Player) -> Optional["BoardState"]:
        """
        Returns a NEW board with `player` dropped into `column`,
        or None if the column is full. self is never modified.
        """
        floor = self.column_floor(column)
        if floor >= self.height:
            return None

        new_board = self.copy()
        new_board.turn_number = self.turn_number + 1
        new_board.cells[floor * self.width + column] = player
        return new_board

    # --- Win detection ---

    def is_decided(self, last_played_column: int) -> bool:
        """
        Checks whether the piece on top of `last_played_column` completes a line.
        The answer is cached for this board; later calls return it unchanged
        whatever column they pass.
        """
        if self.cached_terminal is not None:
            return self.cached_terminal

        self.cached_terminal = self._has_line_through(last_played_column)
        return self.cached_terminal

    def _has_line_through(self, x: int) -> bool:
        y = self.column_floor(x) - 1
        p = self.read(x, y)
        span = range(CONNECT)

        # Vertical
        start, end = find_bounds(y, self.height)
        for i in range(start, end):
            if all(self.read(x, i + k) == p for k in span):
                return True

        # Horizontal
        start, end = find_bounds(x, self.width)
        for i in range(start, end):
            if all(self.read(i + k, y) == p for k in span):
                return True

        # Diagonals: slope -1 and +1, every window of 4 that covers (x, y)
        for slope in (-1, 1):
            for i in span:
                if all(
                    self.read_checked(x + i - k, y + slope * (i - k)) == p
                    for k in span
                ):
                    return True

        return False

    # --- Display ---

    def render(self) -> str:
        """ASCII grid, top row printed first."""
        header = " " + " ".join(str(c) for c in range(self.width))
        rows = []
        for row in range(self.height - 1, -1, -1):
            cells = [SYMBOLS[self.read(c, row)] for c in range(self.width)]
            rows.append("|" + "|".join(cells) + "|")
        return header + "\n" + "\n".join(rows)

    def __repr__(self):
        return f"BoardState({self.width}x{self.height}, turn={self.turn_number})"
