"""FastAPI endpoint for the inventory packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from inventory_packer.grid import HEIGHT, WIDTH
from inventory_packer.io.schemas import OptimizeRequest, OptimizeResponse
from inventory_packer.packing.search import find_best_combination

logger = logging.getLogger(__name__)

# FastAPI app instance (exactly one)
app = FastAPI(
    title="Inventory Packer API",
    description="Selects which marked items fit into the inventory grid",
)


@app.post("/optimize", response_model=OptimizeResponse)
def optimize(request: OptimizeRequest) -> Any:
    """
    Select the best-fitting combination of candidates.

    Input (request body):
        {
            "candidates": [{"id": "a", "width": 2, "height": 2, "stack_size": 5}],
            "existing": [{"x": 0, "y": 0, "width": 1, "height": 3}],
            "ignored_cells": [[11, 4]]
        }

    Returns:
        Selected ids in placement order, positions, score and metrics
    """
    try:
        mask = request.build_mask()
        plan = find_best_combination(
            request.to_items(),
            existing_placements=request.existing,
            ignored_mask=mask,
            seed_count=request.seed_count,
        )
    except ValueError as e:
        return JSONResponse(
            status_code=422,
            content={"error": "INVALID_INPUT", "details": str(e)},
        )
    except Exception as e:
        logger.error(f"ERROR in /optimize endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    response = OptimizeResponse.from_plan(plan)
    logger.info(
        f"selected={len(response.selected)}, "
        f"score={response.score:.4f}, "
        f"fill_rate={response.metrics.fill_rate:.3f}"
    )
    return response


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "ok": True,
        "grid": {"width": WIDTH, "height": HEIGHT},
    }
