"""Immutable board snapshot (flat, row-major cells of None / "X" / "O")."""

MARKS = ("X", "O")


class Board:
    __slots__ = ("size", "cells")

    def __init__(self, size=15, cells=None):
        # Store cells as None (empty), "X" or "O"; index = row * size + col
        if size < 1:
            raise ValueError("board size must be positive")
        if cells is None:
            cells = (None,) * (size * size)
        cells = tuple(cells)
        if len(cells) != size * size:
            raise ValueError(f"expected {size * size} cells, got {len(cells)}")
        for value in cells:
            if value is not None and value not in MARKS:
                raise ValueError(f"invalid cell value: {value!r}")
        self.size = size
        self.cells = cells

    @classmethod
    def empty(cls, size):
        return cls(size)

    def __len__(self):
        return len(self.cells)

    def __getitem__(self, index):
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash((self.size, self.cells))

    def __repr__(self):
        return f"Board(size={self.size}, filled={self.filled_count()})"

    def index_of(self, row, col):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError("move out of bounds")
        return row * self.size + col

    def row_col(self, index):
        return divmod(index, self.size)

    def in_bounds(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self.cells)

    def is_empty(self, index):
        return self.in_bounds(index) and self.cells[index] is None

    def filled_count(self):
        return sum(1 for value in self.cells if value is not None)

    def is_full(self):
        return all(value is not None for value in self.cells)

    def place(self, index, mark):
        """Return a new board with `mark` at `index`; raise if out of bounds or occupied."""
        if mark not in MARKS:
            raise ValueError("mark must be 'X' or 'O'")
        if not self.in_bounds(index):
            raise ValueError("move out of bounds")
        if self.cells[index] is not None:
            raise ValueError("cell already occupied")
        cells = list(self.cells)
        cells[index] = mark
        return Board(self.size, cells)

    def rows(self):
        """Yield each row as a tuple, top to bottom."""
        for start in range(0, len(self.cells), self.size):
            yield self.cells[start:start + self.size]
