from __future__ import annotations

from inventory_packer.main import main, run_case
from inventory_packer.models import Item


def test_run_case_prints_summary(capsys) -> None:
    plan = run_case("pair", [Item(id="A", width=3, height=1), Item(id="B", width=20, height=1)])

    out = capsys.readouterr().out
    assert [item.id for item in plan.items] == ["A"]
    assert "CASE: pair" in out
    assert "✅ Selected : ['A']" in out
    assert "❌ Skipped  : ['B']" in out
    assert "###........." in out


def test_main_runs_all_cases(capsys) -> None:
    main()

    out = capsys.readouterr().out
    assert out.count("CASE:") == 4
    assert "top row ignored" in out
