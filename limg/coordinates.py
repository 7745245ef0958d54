from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Coordinates:
    """Row-major (x, y) positions of a width x height grid.

    Iteration is lazy and can be repeated; each pass yields rows top to bottom
    and, inside a row, columns left to right, so the n-th pair has linear
    index ``n``.
    """

    width: int
    height: int

    def __iter__(self) -> Iterator[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def __len__(self) -> int:
        return self.width * self.height

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        x, y = item
        if not (is_index(x) and is_index(y)):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Return the linear row-major index of (x, y)."""
        return y * self.width + x


def is_index(value: object) -> bool:
    """True for plain integers; ``bool`` is excluded."""
    return isinstance(value, int) and not isinstance(value, bool)
