"""Configuration for a nullcheck run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .errors import ConfigurationError

HEADER_EXTENSION = ".h"
DEFAULT_CONFIG_FILE = os.environ.get("NULLCHECK_CONFIG", "nullcheck.toml")
CONFIG_SECTION = "nullcheck"

# Region-begin macro, qualifier keywords and their compiler attribute spellings.
NULLABILITY_MARKERS: Tuple[str, ...] = (
    "NS_ASSUME_NONNULL_BEGIN",
    "nullable",
    "nonnull",
    "_Nullable",
    "_Nonnull",
)


@dataclass(frozen=True)
class CheckConfig:
    header_file: Path
    include_paths: Tuple[Path, ...]
    exclude_paths: Tuple[Path, ...] = ()
    warn_only: bool = False
    verbose: bool = False


def split_path_list(values: Optional[Iterable[str]]) -> list[str]:
    """Flatten ``["a,b", "c"]`` into ``["a", "b", "c"]``."""
    if not values:
        return []
    paths: list[str] = []
    for value in values:
        paths.extend(part.strip() for part in value.split(",") if part.strip())
    return paths


def _canonical_dirs(paths: Iterable[Path], kind: str) -> Tuple[Path, ...]:
    resolved = []
    for path in paths:
        if not path.is_dir():
            raise ConfigurationError(f"{kind} not found at given location: {path}")
        resolved.append(path.resolve())
    return tuple(resolved)


def build_config(
    header_file: Optional[Path],
    include_paths: Iterable[Path] = (),
    exclude_paths: Iterable[Path] = (),
    warn_only: bool = False,
    verbose: bool = False,
) -> CheckConfig:
    """Validate raw option values and return an immutable :class:`CheckConfig`.

    Include and exclude directories are canonicalized here once, so the
    header universe only ever compares realpaths.

    Raises:
        ConfigurationError: if the header file or any directory is invalid.
    """
    if header_file is None:
        raise ConfigurationError("missing header_file.h")
    if not header_file.is_file():
        raise ConfigurationError("header_file.h not found at given location")
    if header_file.suffix != HEADER_EXTENSION:
        raise ConfigurationError(
            f"header_file.h needs to have extension {HEADER_EXTENSION}, given: {header_file.suffix}"
        )

    include_paths = list(include_paths) or [Path(".")]
    return CheckConfig(
        header_file=header_file,
        include_paths=_canonical_dirs(include_paths, "include_path"),
        exclude_paths=_canonical_dirs(exclude_paths, "exclude_path"),
        warn_only=warn_only,
        verbose=verbose,
    )
