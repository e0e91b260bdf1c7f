"""End-to-end tests of the command line entry point."""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from docxref.generate_docs import main

from conftest import write_symbols


def test_main_writes_pages(symbols_dir: Path, tmp_path: Path) -> None:
    """Test the full pipeline from symbol files to Markdown pages."""
    out = tmp_path / "out"
    report = tmp_path / "report.json"
    test_args = ["docxref", str(symbols_dir), str(out), "--home-page", "--report", str(report)]

    with patch.object(sys, "argv", test_args):
        assert main() == 0

    assert (out / "home.md").exists()
    assert (out / "api/shapes-core.md").exists()
    assert (out / "api/shapes-util.md").exists()
    assert (out / "api/shapes-core/Circle.md").exists()
    assert (out / "api/shapes-core/Color.md").exists()
    assert (out / "api/shapes-core/ShapeTools.md").exists()
    assert (out / "api/shapes-util/Helper.md").exists()

    home = (out / "home.md").read_text(encoding="utf-8")
    assert "- [shapes.core](/api/shapes-core)" in home

    helper = (out / "api/shapes-util/Helper.md").read_text(encoding="utf-8")
    assert "See [Circle](/api/shapes-core/Circle)" in helper
    assert "[core.Circle](/api/shapes-core/Circle)" in helper
    assert "[shapes.core](/api/shapes-core)" in helper
    assert "[makeShape()](/api/shapes-core#makeshape)" in helper

    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["unresolved"] == []
    assert data["stats"]["resolved"] > 0


def test_main_dry_run_writes_only_report(tmp_path: Path, monkeypatch) -> None:
    """A dry run resolves every comment and writes the report, no pages."""
    root = write_symbols(
        tmp_path / "symbols",
        {"a.yml": "library: a\nitems:\n  - uid: a.A\n    kind: class\n    summary: See [Nope].\n"},
    )
    out = tmp_path / "out"
    monkeypatch.chdir(tmp_path)

    with patch.object(sys, "argv", ["docxref", str(root), str(out), "--dry-run"]):
        assert main() == 0

    assert not out.exists()
    data = json.loads((tmp_path / "reference_report.json").read_text(encoding="utf-8"))
    assert data["unresolved"] == [{"origin": "a.A", "reference": "Nope", "file": str(root / "a.yml")}]


def test_main_api_root_and_config(symbols_dir: Path, tmp_path: Path) -> None:
    """Verify that --api-root and the config file shape the output."""
    config = tmp_path / "config.yml"
    config.write_text("output:\n  code_language: typescript\n", encoding="utf-8")
    out = tmp_path / "out"
    test_args = ["docxref", str(symbols_dir), str(out), "--api-root", "/ref", "--config", str(config)]

    with patch.object(sys, "argv", test_args):
        assert main() == 0

    circle = (out / "ref/shapes-core/Circle.md").read_text(encoding="utf-8")
    assert "```typescript\nclass Circle extends Shape\n```" in circle
    assert "[Shape](/ref/shapes-core/Shape)" in circle
    assert not (out / "home.md").exists()


def test_main_without_symbol_files(tmp_path: Path) -> None:
    """Verify that an empty symbols folder stops the run."""
    with patch.object(sys, "argv", ["docxref", str(tmp_path), str(tmp_path / "out")]):
        with pytest.raises(SystemExit, match="No .yml files found"):
            main()


def test_main_reports_symbol_file_errors(tmp_path: Path) -> None:
    """Verify that invalid symbol files end the run with a message."""
    root = write_symbols(tmp_path / "symbols", {"a.yml": "items: []\n"})
    with patch.object(sys, "argv", ["docxref", str(root), str(tmp_path / "out")]):
        with pytest.raises(SystemExit, match="missing 'library'"):
            main()
