from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from charmarkov.core.validation import is_count
from charmarkov.errors import MatrixIndexError


class TransitionMatrix:
    """Immutable square table of transition counts.

    Row-major: ``get(r, c)`` is the number of observed ``r -> c`` steps.
    Updates return a new matrix and leave the original untouched.
    """

    __slots__ = ("_size", "_rows")

    def __init__(self, rows: Iterable[Sequence[int]]):
        rows = tuple(tuple(r) for r in rows)
        n = len(rows)
        for i, r in enumerate(rows):
            if len(r) != n:
                raise ValueError(f"row {i} has {len(r)} cells, expected {n}")
            for v in r:
                if not is_count(v):
                    raise ValueError(f"row {i} holds {v!r}, counts must be non-negative ints")
        self._size = n
        self._rows = rows

    @classmethod
    def zeros(cls, size: int) -> "TransitionMatrix":
        if size < 0:
            raise ValueError("matrix size must be >= 0")
        return cls([(0,) * size for _ in range(size)])

    @property
    def size(self) -> int:
        return self._size

    def _check(self, row: int, col: int):
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise MatrixIndexError(row, col, self._size)

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._rows[row][col]

    def set(self, row: int, col: int, value: int) -> "TransitionMatrix":
        self._check(row, col)
        if not is_count(value):
            raise ValueError(f"counts must be non-negative ints, got {value!r}")
        r = list(self._rows[row])
        r[col] = value
        rows = list(self._rows)
        rows[row] = tuple(r)
        return self._replace(rows)

    def increment(self, row: int, col: int, by: int = 1) -> "TransitionMatrix":
        return self.set(row, col, self.get(row, col) + by)

    def add_counts(self, counts: Mapping[tuple[int, int], int]) -> "TransitionMatrix":
        """Apply many ``(row, col) -> n`` increments, copying each touched row once."""
        rows = list(self._rows)
        touched: dict[int, list[int]] = {}
        for (r, c), n in counts.items():
            self._check(r, c)
            if not is_count(n):
                raise ValueError(f"increments must be non-negative ints, got {n!r}")
            if r not in touched:
                touched[r] = list(rows[r])
            touched[r][c] += n
        for r, cells in touched.items():
            rows[r] = tuple(cells)
        return self._replace(rows)

    def row(self, index: int) -> tuple[int, ...]:
        if not 0 <= index < self._size:
            raise MatrixIndexError(index, 0, self._size)
        return self._rows[index]

    def total(self) -> int:
        return sum(sum(r) for r in self._rows)

    def to_lists(self) -> list[list[int]]:
        return [list(r) for r in self._rows]

    def _replace(self, rows) -> "TransitionMatrix":
        # rows are already validated
        m = object.__new__(TransitionMatrix)
        m._size = self._size
        m._rows = tuple(rows)
        return m

    def __add__(self, other):
        if not isinstance(other, TransitionMatrix):
            return NotImplemented
        if other._size != self._size:
            raise ValueError(f"cannot add {self._size}x{self._size} and {other._size}x{other._size} matrices")
        return self._replace(
            tuple(a + b for a, b in zip(ra, rb)) for ra, rb in zip(self._rows, other._rows)
        )

    def __eq__(self, other):
        if not isinstance(other, TransitionMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"TransitionMatrix({self.to_lists()!r})"
