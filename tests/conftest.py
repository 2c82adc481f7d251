"""Pytest configuration and fixtures for nullcheck tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests (realpath, so prefixes compare cleanly)."""
    tmp = Path(tempfile.mkdtemp()).resolve()
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_headers_path() -> Path:
    """Get path to the sample Objective-C header tree."""
    return (Path(__file__).parent / "fixtures" / "sample_headers").resolve()


@pytest.fixture
def write_headers(temp_dir: Path) -> Callable[[Dict[str, str]], Path]:
    """Write ``{relative_path: content}`` below *temp_dir* and return the root."""

    def _write(files: Dict[str, str]) -> Path:
        for rel_path, content in files.items():
            path = temp_dir / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return temp_dir

    return _write


@pytest.fixture
def bridge_project(write_headers) -> Path:
    """Bridge.h -> A.h (no markers) -> B.h (annotated)."""
    return write_headers(
        {
            "Bridge.h": '#import "A.h"\n',
            "A.h": '#import "B.h"\n\n@interface A : NSObject\n@end\n',
            "B.h": "NS_ASSUME_NONNULL_BEGIN\n@interface B : NSObject\n@end\nNS_ASSUME_NONNULL_END\n",
        }
    )
