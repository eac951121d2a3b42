from __future__ import annotations

from typing import Sequence

from inventory_packer.grid import HEIGHT, WIDTH, OccupancyGrid
from inventory_packer.models import Item

GRID_AREA = WIDTH * HEIGHT

AREA_WEIGHT = 0.4
COUNT_WEIGHT = 0.3
STACK_WEIGHT = 0.3


def score_packing(items: Sequence[Item]) -> float:
    """
    Desirability of a packed combination.

    0.4 * covered area share + 0.3 * count term + 0.3 * stack-weighted area share.
    The count term divides the placed count by itself, so any non-empty
    combination gets a flat 0.3 from it. An empty combination scores 0.0.
    """
    if not items:
        return 0.0

    total_area = 0.0
    stack_bonus = 0.0
    for item in items:
        total_area += item.area
        stack_bonus += item.stack_weight * item.area

    count = float(len(items))
    return (
        AREA_WEIGHT * (total_area / GRID_AREA)
        + COUNT_WEIGHT * (count / len(items))
        + STACK_WEIGHT * (stack_bonus / GRID_AREA)
    )


def compute_metrics(grid: OccupancyGrid, items: Sequence[Item]) -> tuple[int, int, float]:
    """Return (used_area, free_area, fill_rate) for items packed into grid."""
    used_area = sum(item.area for item in items)
    free_area = grid.free_cells()
    fill_rate = used_area / GRID_AREA
    return used_area, free_area, fill_rate
