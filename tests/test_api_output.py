"""Tests for API output formatting and input validation."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from inventory_packer.api import app

client = TestClient(app)


def test_success_response_has_guaranteed_fields() -> None:
    """Test that success responses always have guaranteed fields."""
    request = {
        "candidates": [
            {"id": "a", "width": 2, "height": 2, "stack_size": 5},
            {"id": "b", "width": 1, "height": 1},
        ],
        "existing": [{"x": 0, "y": 0, "width": 1, "height": 3}],
    }

    response = client.post("/optimize", json=request)

    assert response.status_code == 200
    data = response.json()

    assert data["selected"] == ["a", "b"]
    assert data["placements"][0] == {"id": "a", "x": 1, "y": 0, "width": 2, "height": 2}
    assert data["placements"][1] == {"id": "b", "x": 3, "y": 0, "width": 1, "height": 1}

    metrics = data["metrics"]
    assert metrics["used_area"] == 5
    assert metrics["free_area"] == 60 - 3 - 5
    assert metrics["fill_rate"] == pytest.approx(5 / 60)

    assert [t["seed"] for t in data["trials"]] == [[2, 2], [1, 1]]
    assert isinstance(data["score"], float)


def test_ignored_cells_are_respected() -> None:
    request = {
        "candidates": [{"id": "row", "width": 12, "height": 1}],
        "ignored_cells": [[x, 0] for x in range(12)],
    }

    response = client.post("/optimize", json=request)

    assert response.status_code == 200
    assert response.json()["placements"] == [
        {"id": "row", "x": 0, "y": 1, "width": 12, "height": 1}
    ]


def test_empty_request_returns_empty_selection() -> None:
    response = client.post("/optimize", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["selected"] == []
    assert data["score"] == 0.0


def test_bad_mask_returns_friendly_422() -> None:
    request = {
        "candidates": [{"id": "a", "width": 1, "height": 1}],
        "ignored": [[False] * 12],
    }

    response = client.post("/optimize", json=request)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "INVALID_INPUT"
    assert "rows" in data["details"]


def test_schema_violation_returns_422() -> None:
    request = {"candidates": [{"id": "a", "width": 1}], "seed_count": 0}

    response = client.post("/optimize", json=request)

    assert response.status_code == 422


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "grid": {"width": 12, "height": 5}}
