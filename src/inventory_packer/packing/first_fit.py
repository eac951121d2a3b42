# src/inventory_packer/packing/first_fit.py

from __future__ import annotations

from typing import Optional

from inventory_packer.grid import OccupancyGrid
from inventory_packer.models import Item


def place_first_fit(item: Item, grid: OccupancyGrid) -> Optional[tuple[int, int]]:
    """
    Place the item at the FIRST free position of a row-major scan.
    - Rows top to bottom, columns left to right
    - Returns the (x, y) used, or None with the grid left untouched
    - Deterministic (no randomness)
    """
    position = grid.find_first_fit(item.width, item.height)
    if position is None:
        return None

    x, y = position
    grid.place(x, y, item.width, item.height)
    return position


def try_place(item: Item, grid: OccupancyGrid) -> bool:
    return place_first_fit(item, grid) is not None
