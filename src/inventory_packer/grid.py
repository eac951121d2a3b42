"""Occupancy model of the 12 x 5 destination inventory."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from inventory_packer.geometry import rect_cells, rect_within
from inventory_packer.models import Placement

WIDTH = 12
HEIGHT = 5

Mask = Sequence[Sequence[bool]]


def empty_mask() -> list[list[bool]]:
    return [[False] * WIDTH for _ in range(HEIGHT)]


def mask_from_cells(cells: Iterable[tuple[int, int]]) -> list[list[bool]]:
    """Build an ignored mask from (x, y) cell coordinates."""
    mask = empty_mask()
    for x, y in cells:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            raise ValueError(f"Ignored cell ({x}, {y}) is outside the {WIDTH}x{HEIGHT} grid")
        mask[y][x] = True
    return mask


def _normalize_mask(ignored_mask: Optional[Mask]) -> list[list[bool]]:
    if ignored_mask is None:
        return empty_mask()
    rows = [list(row) for row in ignored_mask]
    if len(rows) != HEIGHT or any(len(row) != WIDTH for row in rows):
        raise ValueError(f"Ignored mask must be {HEIGHT} rows of {WIDTH} cells")
    return [[bool(cell) for cell in row] for row in rows]


class OccupancyGrid:
    """
    Occupied and ignored cells of the destination inventory.

    Cells are addressed as (x, y): column x in [0, WIDTH), row y in [0, HEIGHT).
    The ignored matrix is never written after construction, so clones share it.
    """

    def __init__(self, ignored_mask: Optional[Mask] = None):
        self._ignored = _normalize_mask(ignored_mask)
        self._occupied = empty_mask()

    def can_fit(self, x: int, y: int, width: int, height: int) -> bool:
        if not rect_within((x, y, width, height), WIDTH, HEIGHT):
            return False

        for col, row in rect_cells((x, y, width, height)):
            if self._occupied[row][col] or self._ignored[row][col]:
                return False

        return True

    def place(self, x: int, y: int, width: int, height: int) -> None:
        """Mark the rectangle occupied. Does not re-check; call can_fit first."""
        for col, row in rect_cells((x, y, width, height)):
            self._occupied[row][col] = True

    def initialize_from_existing(
        self,
        existing_placements: Iterable[Union[Placement, Sequence[int]]],
    ) -> None:
        """Mark items already resident in the inventory as occupied."""
        for placement in existing_placements:
            if isinstance(placement, Placement):
                x, y, w, h = placement.as_rect()
            else:
                x, y, w, h = placement
            # clip to the grid, the host snapshot may report out-of-range slots
            x0, y0 = max(x, 0), max(y, 0)
            x1, y1 = min(x + w, WIDTH), min(y + h, HEIGHT)
            if x1 > x0 and y1 > y0:
                self.place(x0, y0, x1 - x0, y1 - y0)

    def find_first_fit(self, width: int, height: int) -> Optional[tuple[int, int]]:
        """First (x, y) in row-major order where the rectangle fits."""
        for y in range(HEIGHT):
            for x in range(WIDTH):
                if self.can_fit(x, y, width, height):
                    return x, y
        return None

    def clone(self) -> "OccupancyGrid":
        copy = OccupancyGrid.__new__(OccupancyGrid)
        copy._ignored = self._ignored
        copy._occupied = [row[:] for row in self._occupied]
        return copy

    def is_occupied(self, x: int, y: int) -> bool:
        return self._occupied[y][x]

    def is_ignored(self, x: int, y: int) -> bool:
        return self._ignored[y][x]

    def free_cells(self) -> int:
        """Number of cells that are neither occupied nor ignored."""
        return sum(
            1
            for y in range(HEIGHT)
            for x in range(WIDTH)
            if not (self._occupied[y][x] or self._ignored[y][x])
        )

    def to_rows(self) -> list[str]:
        """Render rows as text: '#' occupied, 'x' ignored, '.' free."""
        rows = []
        for y in range(HEIGHT):
            chars = []
            for x in range(WIDTH):
                if self._ignored[y][x]:
                    chars.append("x")
                elif self._occupied[y][x]:
                    chars.append("#")
                else:
                    chars.append(".")
            rows.append("".join(chars))
        return rows

    def __repr__(self) -> str:
        return f"OccupancyGrid(free={self.free_cells()})"
