"""Seeded greedy search for the best-scoring combination of candidates."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from inventory_packer.config import get_settings
from inventory_packer.grid import Mask, OccupancyGrid
from inventory_packer.metrics import compute_metrics, score_packing
from inventory_packer.models import Item, ItemPlacement, PackingPlan, Placement, TrialResult
from inventory_packer.packing.first_fit import place_first_fit
from inventory_packer.packing.grouping import ItemGroup, group_items

logger = logging.getLogger(__name__)

ExistingPlacements = Iterable[Union[Placement, Sequence[int]]]


def fill_remaining_space(
    grid: OccupancyGrid,
    groups: Sequence[ItemGroup],
    items: Sequence[Item],
    trial: TrialResult,
    placed: set[int],
) -> None:
    """
    Sweep every group and member until a full sweep places nothing new.

    Placements are never undone, so this stops after at most len(items) sweeps
    that change anything.
    """
    changed = True
    while changed:
        changed = False
        for group in groups:
            for index in group.indices:
                if index in placed:
                    continue

                item = items[index]
                position = place_first_fit(item, grid)
                if position is not None:
                    x, y = position
                    trial.placements.append(ItemPlacement(item=item, x=x, y=y))
                    placed.add(index)
                    changed = True
        trial.sweep_sizes.append(len(trial.placements))


def run_trial(
    base_grid: OccupancyGrid,
    seed: ItemGroup,
    groups: Sequence[ItemGroup],
    items: Sequence[Item],
) -> tuple[TrialResult, OccupancyGrid]:
    """Place the seed group's first item on a copy of the grid, then fill."""
    grid = base_grid.clone()
    trial = TrialResult(seed_width=seed.width, seed_height=seed.height)

    seed_index = seed.indices[0]
    seed_item = items[seed_index]
    position = place_first_fit(seed_item, grid)
    if position is None:
        return trial, grid

    x, y = position
    trial.seed_placed = True
    trial.placements.append(ItemPlacement(item=seed_item, x=x, y=y))
    fill_remaining_space(grid, groups, items, trial, placed={seed_index})
    trial.score = score_packing(trial.items)
    return trial, grid


def find_best_combination(
    candidate_items: Sequence[Item],
    existing_placements: ExistingPlacements = (),
    ignored_mask: Optional[Mask] = None,
    seed_count: Optional[int] = None,
) -> PackingPlan:
    """
    Try the largest footprint groups as seeds and keep the best-scoring fill.

    Args:
        candidate_items: Items eligible for the move, in host order
        existing_placements: (x, y, width, height) of items already in the grid
        ignored_mask: HEIGHT x WIDTH booleans marking unusable cells
        seed_count: Groups tried as seeds, defaults to PACKER_SEED_COUNT (3)

    Returns:
        PackingPlan with the winning placements (empty if no seed fits)
    """
    if seed_count is None:
        seed_count = get_settings().seed_count
    if seed_count < 1:
        raise ValueError(f"seed_count must be at least 1, got {seed_count}")

    items = list(candidate_items)
    base_grid = OccupancyGrid(ignored_mask)
    base_grid.initialize_from_existing(existing_placements)

    groups = group_items(items)

    plan = PackingPlan()
    best_grid = base_grid
    best_score = 0.0
    for seed in groups[:seed_count]:
        trial, grid = run_trial(base_grid, seed, groups, items)
        plan.trials.append(trial)
        logger.debug(
            "seed %sx%s placed=%s items=%d score=%.4f",
            seed.width, seed.height, trial.seed_placed, len(trial.placements), trial.score,
        )
        if not trial.seed_placed:
            continue

        # strictly greater: ties keep the earlier trial
        if trial.score > best_score:
            best_score = trial.score
            best_grid = grid
            plan.placements = list(trial.placements)

    plan.score = best_score
    plan.used_area, plan.free_area, plan.fill_rate = compute_metrics(best_grid, plan.items)

    logger.info(
        "candidates=%d, groups=%d, selected=%d, score=%.4f",
        len(items), len(groups), len(plan.placements), plan.score,
    )
    return plan


def optimize(
    candidate_items: Sequence[Item],
    existing_placements: ExistingPlacements = (),
    ignored_mask: Optional[Mask] = None,
    seed_count: Optional[int] = None,
) -> list[Item]:
    """Items to move, in placement order (seed first)."""
    plan = find_best_combination(candidate_items, existing_placements, ignored_mask, seed_count)
    return plan.items
