"""End-to-end tests for NullabilityOrchestrator."""

from pathlib import Path

import pytest

from nullcheck_cli.config import build_config
from nullcheck_cli.errors import EmptyUniverseError
from nullcheck_cli.orchestrator import NullabilityOrchestrator


def test_bridge_scenario(bridge_project: Path):
    config = build_config(bridge_project / "Bridge.h", include_paths=[bridge_project])
    result = NullabilityOrchestrator(config).run()

    assert result.traversal.closure == {"A.h", "B.h"}
    assert result.missing_nullability == [bridge_project / "A.h"]
    assert not result.ok


def test_sample_project_with_exclusion(sample_headers_path: Path):
    config = build_config(
        sample_headers_path / "Bridge.h",
        include_paths=[sample_headers_path],
        exclude_paths=[sample_headers_path / "Vendor"],
    )
    result = NullabilityOrchestrator(config).run()

    assert [p.name for p in result.traversal.resolved_files] == [
        "AppDelegate.h",
        "NetworkClient.h",
        "Models.h",
    ]
    assert [p.name for p in result.missing_nullability] == ["Models.h"]
    assert "VendorSDK.h" in result.traversal.unresolved


def test_empty_universe(write_headers):
    root = write_headers({"Bridge.h": "", "empty/readme.txt": ""})
    config = build_config(root / "Bridge.h", include_paths=[root / "empty"])

    with pytest.raises(EmptyUniverseError):
        NullabilityOrchestrator(config).run()


def test_entry_without_imports_is_ok(write_headers):
    root = write_headers({"Bridge.h": "// nothing here\n"})
    config = build_config(root / "Bridge.h", include_paths=[root])
    result = NullabilityOrchestrator(config).run()

    assert result.traversal.references == []
    assert result.ok
