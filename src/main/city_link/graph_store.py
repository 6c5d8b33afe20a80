"""Graph store: owns the dense adjacency matrix of a set of cities.

The input is whitespace separated integers: the number of cities N followed by
N*N cell values in row-major order. Values other than 0 and 1 are accepted as
they are; callers compare them for truthiness.
"""
import logging
from typing import Optional

from .errors import CityLinkError, MalformedInput
from .net import NodeId

logger = logging.getLogger(__name__)


class Matrix:
    def __init__(self, size: int, cells: list[list[int]]):
        if size <= 0:
            raise MalformedInput(f"number of cities must be positive, got {size}")
        if len(cells) != size or any(len(row) != size for row in cells):
            raise MalformedInput(f"adjacency matrix must have {size} rows of {size} values")
        self.size = size
        self._cells: Optional[list[list[int]]] = cells

    def __repr__(self):
        return f"Matrix(size={self.size}, released={self.released})"

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and self._live_cells() == other._live_cells()

    def __enter__(self) -> 'Matrix':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()

    @property
    def released(self) -> bool:
        return self._cells is None

    def cell(self, source: NodeId, target: NodeId) -> int:
        return self._live_cells()[source][target]

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        return bool(self._live_cells()[source][target])

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._live_cells()]

    def contains(self, node: NodeId) -> bool:
        return 0 <= node < self.size

    def release(self) -> None:
        if self._cells is None:
            raise CityLinkError("adjacency matrix has already been released")
        self._cells = None

    def _live_cells(self) -> list[list[int]]:
        if self._cells is None:
            raise CityLinkError("adjacency matrix has been released")
        return self._cells


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedInput(f"expected an integer for {what}, got {token!r}")


def load(raw_input: str, max_city_count: Optional[int] = None) -> Matrix:
    tokens = raw_input.split()
    if len(tokens) == 0:
        raise MalformedInput("failed to read the number of cities")
    size = _parse_int(tokens[0], "the number of cities")
    if size <= 0:
        raise MalformedInput(f"number of cities must be positive, got {size}")
    if max_city_count is not None and size > max_city_count:
        raise MalformedInput(f"{size} cities exceed the limit of {max_city_count}")
    values = tokens[1:1 + size * size]
    if len(values) < size * size:
        raise MalformedInput(
            f"failed to read the adjacency matrix: expected {size * size} values, got {len(values)}"
        )
    cells = [
        [
            _parse_int(values[row * size + column], f"cell ({row}, {column})")
            for column in range(size)
        ]
        for row in range(size)
    ]
    logger.debug("loaded adjacency matrix of %d cities", size)
    return Matrix(size, cells)


def load_file(path, max_city_count: Optional[int] = None) -> Matrix:
    with open(path, 'r') as file:
        return load(file.read(), max_city_count=max_city_count)


def release(matrix: Matrix) -> None:
    matrix.release()
