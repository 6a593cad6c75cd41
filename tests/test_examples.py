"""Full-stack scenario tests.

Each directory under examples/ holds the text fed to stdin (input.txt) and
either the expected stdout (expected.txt) or a fragment of the expected
stderr for a failed run (error.txt).
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from gradecheck.cli import main

EXAMPLES = Path(__file__).parent.parent / "examples"

SCENARIOS = sorted(p.name for p in EXAMPLES.iterdir() if p.is_dir())


def _run(stdin_text: str) -> int:
    """Run the CLI on *stdin_text*; return the exit code."""
    with patch("sys.stdin", StringIO(stdin_text)):
        try:
            main()
        except SystemExit as exc:
            return exc.code
    return 0


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_scenarios_present():
    assert SCENARIOS


@pytest.mark.parametrize("name", SCENARIOS)
def test_scenario(name, capsys):
    base = EXAMPLES / name
    code = _run((base / "input.txt").read_text())
    captured = capsys.readouterr()
    expected = base / "expected.txt"
    if expected.exists():
        assert code == 0
        assert captured.out == expected.read_text()
    else:
        assert code == 1
        assert (base / "error.txt").read_text().strip() in captured.err
        assert captured.out == "Enter marks: \n"
