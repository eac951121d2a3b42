from __future__ import annotations

import json

from inventory_packer.cli import main

REQUEST = {
    "candidates": [
        {"id": f"S{i}", "width": 2, "height": 2} for i in range(5)
    ],
    "ignored_cells": [[11, 4]],
}


def write_request(tmp_path, payload) -> str:
    path = tmp_path / "request.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_writes_plan_file(tmp_path) -> None:
    output = tmp_path / "out" / "plan.json"

    code = main(["--input", write_request(tmp_path, REQUEST), "--output", str(output)])

    assert code == 0
    plan = json.loads(output.read_text(encoding="utf-8"))
    assert plan["selected"] == ["S0", "S1", "S2", "S3", "S4"]
    assert plan["metrics"]["used_area"] == 20
    assert plan["metrics"]["free_area"] == 60 - 1 - 20


def test_prints_plan_to_stdout_and_grid_to_stderr(tmp_path, capsys) -> None:
    code = main(["--input", write_request(tmp_path, REQUEST), "--show-grid"])

    assert code == 0
    captured = capsys.readouterr()
    plan = json.loads(captured.out)
    assert len(plan["placements"]) == 5
    assert "##########.." in captured.err
    assert "...........x" in captured.err


def test_seed_count_flag(tmp_path) -> None:
    payload = {
        "candidates": [
            {"id": "big", "width": 12, "height": 5},
            {"id": "gem0", "width": 1, "height": 1, "stack_size": 100},
            {"id": "gem1", "width": 1, "height": 1, "stack_size": 100},
        ]
    }
    output = tmp_path / "plan.json"

    code = main([
        "--input", write_request(tmp_path, payload),
        "--output", str(output),
        "--seed-count", "1",
    ])

    assert code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["selected"] == ["big"]


def test_invalid_input_exit_code(tmp_path) -> None:
    bad_mask = dict(REQUEST, ignored=[[True] * 3])

    assert main(["--input", write_request(tmp_path, bad_mask)]) == 2
    assert main(["--input", str(tmp_path / "missing.json")]) == 2

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert main(["--input", str(broken)]) == 2


def test_invalid_log_level(tmp_path) -> None:
    assert main(["--input", write_request(tmp_path, REQUEST), "--log-level", "LOUD"]) == 2
