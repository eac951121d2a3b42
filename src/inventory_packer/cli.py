from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from inventory_packer.config import Settings, get_settings
from inventory_packer.grid import OccupancyGrid
from inventory_packer.io.schemas import OptimizeRequest, OptimizeResponse
from inventory_packer.packing.search import find_best_combination

logger = logging.getLogger(__name__)


def load_input(path: Path) -> OptimizeRequest:
    data = json.loads(path.read_text(encoding="utf-8"))
    return OptimizeRequest.model_validate(data)


def write_plan(response: OptimizeResponse, output: str | None) -> None:
    text = json.dumps(response.model_dump(), indent=2)
    if output is None:
        print(text)
        return
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")


def render_selection(request: OptimizeRequest, response: OptimizeResponse) -> list[str]:
    """Grid rows after the selection is applied on top of the existing items."""
    grid = OccupancyGrid(request.build_mask())
    grid.initialize_from_existing(request.existing)
    for p in response.placements:
        grid.place(p.x, p.y, p.width, p.height)
    return grid.to_rows()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inventory Packer CLI")
    parser.add_argument("--input", required=True, help="Request JSON file")
    parser.add_argument("--output", help="Output plan JSON file (stdout if omitted)")
    parser.add_argument(
        "--seed-count",
        type=int,
        help="Largest footprint groups tried as seeds (overrides PACKER_SEED_COUNT)",
    )
    parser.add_argument("--log-level", help="Logging level (overrides PACKER_LOG_LEVEL)")
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Print the resulting grid to stderr",
    )

    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        if args.log_level:
            settings = Settings(seed_count=settings.seed_count, log_level=args.log_level)
    except (ValueError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = load_input(Path(args.input))
        seed_count = args.seed_count if args.seed_count is not None else request.seed_count
        if seed_count is None:
            seed_count = settings.seed_count
        plan = find_best_combination(
            request.to_items(),
            existing_placements=request.existing,
            ignored_mask=request.build_mask(),
            seed_count=seed_count,
        )
    except (OSError, json.JSONDecodeError, ValidationError, ValueError) as e:
        logger.error("Cannot optimize %s: %s", args.input, e)
        return 2

    response = OptimizeResponse.from_plan(plan)
    write_plan(response, args.output)

    if args.show_grid:
        for row in render_selection(request, response):
            print(row, file=sys.stderr)
    if args.output:
        logger.info("Plan with %d items written to %s", len(response.selected), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
