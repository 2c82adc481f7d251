"""Enumeration of the header files eligible as import targets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Set

from .config import HEADER_EXTENSION
from .errors import EmptyUniverseError
from .models import HeaderUniverse

logger = logging.getLogger(__name__)


def is_excluded(header: Path, exclude_paths: Iterable[Path]) -> bool:
    """Literal string-prefix match, so ``/src/Ex`` also excludes ``/src/Extra``."""
    header_str = str(header)
    return any(header_str.startswith(str(excluded)) for excluded in exclude_paths)


def _is_hidden(header: Path, include_path: Path) -> bool:
    """Dot-files and anything below a dot-directory (.build, .git) are not globbed."""
    return any(part.startswith(".") for part in header.relative_to(include_path).parts)


def build_universe(include_paths: Iterable[Path], exclude_paths: Iterable[Path] = ()) -> HeaderUniverse:
    """Collect every header below *include_paths* that is not excluded.

    Both path sets are expected to be canonical already; resolving the
    directories once is much cheaper than resolving every header.

    Raises:
        EmptyUniverseError: if no header survives the filtering.
    """
    exclude_paths = list(exclude_paths)
    seen: Set[Path] = set()
    headers: List[Path] = []

    for include_path in include_paths:
        for header in sorted(include_path.rglob(f"*{HEADER_EXTENSION}")):
            if header in seen or _is_hidden(header, include_path):
                continue
            seen.add(header)
            if not header.is_file():
                continue
            if is_excluded(header, exclude_paths):
                logger.debug("Excluded %s", header)
                continue
            headers.append(header)

    if not headers:
        raise EmptyUniverseError()

    logger.debug("Header universe contains %d files", len(headers))
    return HeaderUniverse(tuple(headers))
