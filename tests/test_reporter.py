"""Tests for console output and exit codes."""

from pathlib import Path

from nullcheck_cli.models import CheckResult, TraversalResult
from nullcheck_cli.reporter import Reporter


def _result(missing=()):
    traversal = TraversalResult(
        entry_file=Path("/src/Bridge.h"),
        references=["A.h", "UIKit/UIKit.h"],
        resolved={"A.h": Path("/src/A.h")},
    )
    return CheckResult(traversal=traversal, missing_nullability=list(missing))


def test_verbose_stdout_only_lists_unresolved_imports(capsys):
    exit_code = Reporter(verbose=True).report(_result())
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "import not found/excluded: UIKit/UIKit.h\n"
    assert "Imports reachable from Bridge.h" in captured.err


def test_diagnostics_go_to_stderr(capsys):
    exit_code = Reporter().report(_result(missing=[Path("/src/A.h")]))
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == "/src/A.h:0: error: missing nullability in file /src/A.h\n"


def test_warn_only_bail_out(capsys):
    assert Reporter(warn_only=True).bail_out("no headers found in search folders") == 0
    assert capsys.readouterr().err == "no headers found in search folders\n"
