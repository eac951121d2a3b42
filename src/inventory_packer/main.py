from __future__ import annotations

from typing import Optional, Sequence

from inventory_packer.grid import HEIGHT, WIDTH, Mask, OccupancyGrid
from inventory_packer.models import Item, PackingPlan
from inventory_packer.packing.search import find_best_combination


def run_case(
    title: str,
    items: list[Item],
    existing: Sequence[tuple[int, int, int, int]] = (),
    ignored_mask: Optional[Mask] = None,
) -> PackingPlan:
    print("\n" + "=" * 60)
    print(f"📦 CASE: {title} ({WIDTH} x {HEIGHT} grid)")

    plan = find_best_combination(items, existing, ignored_mask)

    selected_ids = [item.id for item in plan.items]
    selected = set(selected_ids)
    skipped_ids = [item.id for item in items if item.id not in selected]

    print("✅ Selected :", selected_ids if selected_ids else "(none)")
    print("❌ Skipped  :", skipped_ids if skipped_ids else "(none)")

    grid = OccupancyGrid(ignored_mask)
    grid.initialize_from_existing(existing)
    for p in plan.placements:
        grid.place(*p.as_rect())

    print("\n📦 GRID:")
    for row in grid.to_rows():
        print(" ", row)

    print("\n📊 SCORE:")
    print(f"  Score     : {plan.score:.4f}")
    print(f"  Used area : {plan.used_area}")
    print(f"  Fill rate : {plan.fill_rate * 100:.2f}%")
    return plan


def main() -> None:
    blocked_top_row = [[True] * WIDTH] + [[False] * WIDTH for _ in range(HEIGHT - 1)]

    run_case("five 2x2", [Item(id=f"S{i}", width=2, height=2) for i in range(5)])
    run_case("too wide", [Item(id="W", width=WIDTH + 1, height=1)])
    run_case("top row ignored", [Item(id="R", width=WIDTH, height=1)], ignored_mask=blocked_top_row)
    run_case(
        "mixed with existing",
        [Item(id=f"B{i}", width=3, height=3) for i in range(3)]
        + [Item(id=f"C{i}", width=1, height=1, stack_size=20) for i in range(2)],
        existing=[(0, 0, 2, 5)],
    )


if __name__ == "__main__":
    main()
