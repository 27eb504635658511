from __future__ import annotations

import sys

import pytest

import main
from core import __version__


def test_dev_entry_point_runs_cli(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["gitignite", "--version"])

    with pytest.raises(SystemExit) as excinfo:
        main.main()

    assert excinfo.value.code == 0
    assert f"gitignite {__version__}" in capsys.readouterr().out
