from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from inventory_packer.models import Item


@dataclass
class ItemGroup:
    """Candidates sharing one footprint, referenced by candidate index."""

    width: int
    height: int
    indices: list[int] = field(default_factory=list)
    stack_size: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def footprint(self) -> tuple[int, int]:
        return self.width, self.height


def group_items(items: Sequence[Item]) -> list[ItemGroup]:
    """
    Partition candidates by (width, height), largest area first.

    Groups with equal area keep the order in which their footprint was first
    encountered (sorted() is stable, dicts keep insertion order).
    """
    groups: dict[tuple[int, int], ItemGroup] = {}
    for index, item in enumerate(items):
        key = (item.width, item.height)
        group = groups.get(key)
        if group is None:
            group = groups[key] = ItemGroup(width=item.width, height=item.height)
        group.indices.append(index)
        group.stack_size += item.stack_weight

    return sorted(groups.values(), key=lambda g: g.area, reverse=True)
