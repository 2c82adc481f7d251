"""Coordinates universe building, import traversal and nullability checks."""

from __future__ import annotations

from .checker import find_missing_nullability
from .config import CheckConfig
from .models import CheckResult, HeaderUniverse, TraversalResult
from .universe import build_universe
from .walker import ImportWalker


class NullabilityOrchestrator:
    """Runs one check for a validated :class:`CheckConfig`."""

    def __init__(self, config: CheckConfig):
        self.config = config

    def build_universe(self) -> HeaderUniverse:
        return build_universe(self.config.include_paths, self.config.exclude_paths)

    def traverse(self, universe: HeaderUniverse) -> TraversalResult:
        return ImportWalker(universe).walk(self.config.header_file)

    def run(self) -> CheckResult:
        """Raises :class:`~nullcheck_cli.errors.EmptyUniverseError` when there is nothing to check."""
        traversal = self.traverse(self.build_universe())
        return CheckResult(
            traversal=traversal,
            missing_nullability=find_missing_nullability(traversal.resolved_files),
        )
