from __future__ import annotations

from inventory_packer.models import Item
from inventory_packer.packing.grouping import group_items


def test_groups_sorted_by_area_with_stable_ties() -> None:
    items = [
        Item(id="a", width=1, height=1),
        Item(id="b", width=2, height=2),
        Item(id="c", width=1, height=1, stack_size=7),
        Item(id="d", width=2, height=1, stack_size=3),
        Item(id="e", width=1, height=2),
    ]

    groups = group_items(items)

    assert [g.footprint for g in groups] == [(2, 2), (2, 1), (1, 2), (1, 1)]
    assert [g.area for g in groups] == [4, 2, 2, 1]
    assert [g.indices for g in groups] == [[1], [3], [4], [0, 2]]
    # unstackable items weigh 1
    assert [g.stack_size for g in groups] == [1, 3, 1, 8]


def test_equal_items_stay_distinct_members() -> None:
    items = [Item(id="x", width=1, height=1), Item(id="x", width=1, height=1)]

    (group,) = group_items(items)

    assert group.indices == [0, 1]


def test_no_candidates_no_groups() -> None:
    assert group_items([]) == []
