"""Transitive closure of textual imports starting from an entry header."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Set

from .models import HeaderUniverse, ImportReference, TraversalResult
from .parser import imports_in_file, resolve_import

logger = logging.getLogger(__name__)


class ImportWalker:
    """Follow ``#import`` statements through a :class:`HeaderUniverse`.

    Expansion is keyed on the textual reference: once a reference string has
    been seen it is never expanded again, which is what makes import cycles
    terminate. Two different strings resolving to the same header are
    expanded independently.
    """

    def __init__(self, universe: HeaderUniverse):
        self.universe = universe

    def walk(self, entry_file: Path) -> TraversalResult:
        """Return every reference reachable from *entry_file*.

        The entry file itself is only part of the result when some header
        imports it.
        """
        result = TraversalResult(entry_file=entry_file)
        self._traverse(imports_in_file(entry_file), result)
        return result

    def expand(self, references: Iterable[ImportReference], entry_file: Path = Path()) -> TraversalResult:
        """Run the traversal seeded with *references* instead of a file."""
        result = TraversalResult(entry_file=entry_file)
        self._traverse(list(references), result)
        return result

    def _traverse(self, initial: List[ImportReference], result: TraversalResult) -> None:
        visited: Set[ImportReference] = set()
        stack: List[Path] = list(reversed(self._visit(initial, visited, result)))

        while stack:
            current = stack.pop()
            logger.debug("Expanding %s", current)
            children = self._visit(imports_in_file(current), visited, result)
            # Reversed so the first import is expanded first, depth-first.
            stack.extend(reversed(children))

    def _visit(
        self,
        references: List[ImportReference],
        visited: Set[ImportReference],
        result: TraversalResult,
    ) -> List[Path]:
        """Mark unseen *references* visited and return the headers they resolve to."""
        new_refs: List[ImportReference] = []
        for ref in references:
            if ref not in visited:
                visited.add(ref)
                new_refs.append(ref)
        result.references.extend(new_refs)

        files: List[Path] = []
        for ref in new_refs:
            resolved = resolve_import(ref, self.universe)
            if resolved is not None:
                result.resolved[ref] = resolved
                files.append(resolved)
        return files
