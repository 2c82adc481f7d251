"""Nullability marker detection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from .config import NULLABILITY_MARKERS
from .parser import read_source

logger = logging.getLogger(__name__)


def contains_nullability(file_path: Path, markers: Sequence[str] = NULLABILITY_MARKERS) -> bool:
    """Return True if any line of *file_path* contains a nullability marker.

    Plain substring search: a marker in a comment or string literal counts.
    clang warns about every missing annotation in a header as soon as it
    holds one, so a single marker is enough.
    """
    for line in read_source(file_path).splitlines():
        if any(marker in line for marker in markers):
            return True
    return False


def find_missing_nullability(files: Iterable[Path]) -> List[Path]:
    missing = [path for path in files if not contains_nullability(path)]
    logger.debug("%d header(s) without nullability", len(missing))
    return missing
