from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import FrozenSet, Iterator, NamedTuple, Optional, Sequence, Tuple

from spotdiff.core.errors import AlphabetTooSmall, InvalidDifferenceCount, InvalidSize

logger = logging.getLogger(__name__)

Grid = Tuple[Tuple[str, ...], ...]

MIN_SIZE = 2


class Coordinate(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Puzzle:
    """A generated pair of grids and the cells where they differ."""

    base: Grid
    modified: Grid
    differences: FrozenSet[Coordinate]

    @property
    def size(self) -> int:
        return len(self.base)

    def cells(self) -> Iterator[Coordinate]:
        for row in range(self.size):
            for col in range(self.size):
                yield Coordinate(row, col)

    def contains(self, coord: Coordinate) -> bool:
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def is_difference(self, coord: Coordinate) -> bool:
        return coord in self.differences

    def differing_cells(self) -> FrozenSet[Coordinate]:
        """Cells where the two grids actually hold different symbols."""
        return frozenset(
            c for c in self.cells() if self.base[c.row][c.col] != self.modified[c.row][c.col]
        )


def generate_puzzle(
    size: int,
    alphabet: Sequence[str],
    differences: int,
    rng: Optional[random.Random] = None,
) -> Puzzle:
    """Build a puzzle with exactly ``differences`` altered cells.

    Every cell of the base grid is drawn uniformly (with replacement) from
    ``alphabet``. The altered cells are picked uniformly without replacement
    and each receives a symbol different from the one it replaces.

    Raises ``InvalidSize``, ``InvalidDifferenceCount`` or ``AlphabetTooSmall``
    before consuming any randomness.
    """
    if size < MIN_SIZE:
        raise InvalidSize(f"Grid size must be at least {MIN_SIZE}, got {size}")
    cell_count = size * size
    if differences < 1 or differences > cell_count:
        raise InvalidDifferenceCount(
            f"Difference count must be between 1 and {cell_count}, got {differences}"
        )
    symbols = list(alphabet)
    if len(set(symbols)) < 2:
        raise AlphabetTooSmall(
            f"Alphabet needs at least 2 distinct symbols, got {len(set(symbols))}"
        )

    rng = rng or random.Random()
    base = [[rng.choice(symbols) for _ in range(size)] for _ in range(size)]
    modified = [list(row) for row in base]

    picked = rng.sample(range(cell_count), differences)
    diff_cells = set()
    for index in picked:
        row, col = divmod(index, size)
        current = modified[row][col]
        replacement = rng.choice(symbols)
        while replacement == current:
            replacement = rng.choice(symbols)
        modified[row][col] = replacement
        diff_cells.add(Coordinate(row, col))

    logger.debug("Generated %dx%d puzzle with %d differences", size, size, differences)
    return Puzzle(
        base=tuple(tuple(row) for row in base),
        modified=tuple(tuple(row) for row in modified),
        differences=frozenset(diff_cells),
    )
