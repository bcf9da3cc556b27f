"""Tests for version_realign.shell."""

from __future__ import annotations

import pytest

from version_realign.shell import RULE, fatal, step


def test_step_prints_ruled_header(capsys: pytest.CaptureFixture[str]) -> None:
    step("Collecting published versions")
    assert capsys.readouterr().out == f"\n{RULE}\nCollecting published versions\n{RULE}\n"


def test_fatal_exits_with_message_on_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        fatal("org.example:core listed twice")
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.err == "ERROR: org.example:core listed twice\n"
    assert captured.out == ""
