"""Core data models shared by the universe builder, walker and reporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

ImportReference = str


@dataclass(frozen=True)
class HeaderUniverse:
    """Every header a textual import may resolve to, in enumeration order."""

    headers: Tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.headers)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.headers)

    def __contains__(self, path: object) -> bool:
        return path in self.headers

    def resolve(self, reference: ImportReference) -> Optional[Path]:
        """Return the first header whose path ends with *reference*."""
        for header in self.headers:
            if str(header).endswith(reference):
                return header
        return None


@dataclass
class TraversalResult:
    entry_file: Path
    references: List[ImportReference] = field(default_factory=list)
    resolved: Dict[ImportReference, Path] = field(default_factory=dict)

    @property
    def closure(self) -> set:
        return set(self.references)

    @property
    def unresolved(self) -> List[ImportReference]:
        return [ref for ref in self.references if ref not in self.resolved]

    @property
    def resolved_files(self) -> List[Path]:
        # Two references may name the same header; report it once.
        files: List[Path] = []
        for ref in self.references:
            path = self.resolved.get(ref)
            if path is not None and path not in files:
                files.append(path)
        return files


@dataclass
class CheckResult:
    traversal: TraversalResult
    missing_nullability: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_nullability
