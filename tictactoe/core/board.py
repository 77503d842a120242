from typing import Iterator, Sequence, Tuple
import numpy as np
from enum import Enum

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Marker(Enum):
    """Cell markers. EMPTY is falsy so it reads like a blank square."""
    EMPTY = 0
    X = 1
    O = 2

    def symbol(self) -> str:
        return {0: ".", 1: "X", 2: "O"}[self.value]

    @staticmethod
    def from_symbol(sym: str) -> "Marker":
        key = sym.strip().upper()
        if key in (".", "", "_", "-"):
            return Marker.EMPTY
        if key == "X":
            return Marker.X
        if key == "O":
            return Marker.O
        raise ValueError(f"Unknown marker symbol: {sym!r}")

    def __bool__(self) -> bool:
        return self != Marker.EMPTY

    def __str__(self) -> str:
        return self.symbol()


class Board:
    """
    Immutable 3x3 board snapshot.

    - Cells are indexed 0..8 row-major (row * 3 + col).
    - Internally stores a read-only numpy array of Marker values.
    - Every change produces a new Board; the original is never touched.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Sequence[Marker] = ()) -> None:
        if len(cells) == 0:
            cells = [Marker.EMPTY] * CELL_COUNT
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Board needs exactly {CELL_COUNT} cells, got {len(cells)}")
        for c in cells:
            if not isinstance(c, Marker):
                raise TypeError("Board cells must be Marker values")
        arr = np.array([c.value for c in cells], dtype=np.int8)
        arr.flags.writeable = False
        self._cells: np.ndarray = arr

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_symbols(cls, text: str) -> "Board":
        """
        Build a board from 9 symbols, e.g. "XO.|.X.|..O".
        Whitespace and '|' separators are ignored.
        """
        syms = [ch for ch in text if not ch.isspace() and ch != "|"]
        return cls([Marker.from_symbol(ch) for ch in syms])

    @property
    def cells(self) -> np.ndarray:
        """Read-only numpy view of the raw marker values."""
        return self._cells

    # ---------- Cell access ----------

    def in_bounds(self, index: int) -> bool:
        return isinstance(index, int) and 0 <= index < CELL_COUNT

    def get(self, index: int) -> Marker:
        if not self.in_bounds(index):
            raise IndexError(f"Out of bounds: {index}")
        return Marker(int(self._cells[index]))

    def is_empty(self, index: int) -> bool:
        return self.get(index) == Marker.EMPTY

    def with_marker(self, index: int, marker: Marker) -> "Board":
        """
        Return a copy with `index` set to `marker`.

        Raises:
            IndexError if out of bounds, ValueError if marker is EMPTY.
        """
        if marker == Marker.EMPTY:
            raise ValueError("Cannot place EMPTY")
        if not self.in_bounds(index):
            raise IndexError(f"Out of bounds: {index}")
        new_cells = np.copy(self._cells)
        new_cells[index] = marker.value
        board = Board.__new__(Board)
        new_cells.flags.writeable = False
        board._cells = new_cells
        return board

    # ---------- Iteration / helpers ----------

    def filled_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def rows(self) -> Iterator[Tuple[Marker, ...]]:
        for r in range(BOARD_SIZE):
            yield tuple(self.get(r * BOARD_SIZE + c) for c in range(BOARD_SIZE))

    def __iter__(self) -> Iterator[Marker]:
        for v in self._cells:
            yield Marker(int(v))

    def __len__(self) -> int:
        return CELL_COUNT

    def __getitem__(self, index: int) -> Marker:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({''.join(m.symbol() for m in self)!r})"

    # ---------- Rendering ----------

    def to_cli(self) -> str:
        letters = [chr(ord("A") + i) for i in range(BOARD_SIZE)]
        lines = ["     " + " ".join(letters)]
        for y, row in enumerate(self.rows(), start=1):
            lines.append(f"{str(y).rjust(3)}  " + " ".join(m.symbol() for m in row))
        return "\n".join(lines)
