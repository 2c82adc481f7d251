"""Textual ``#import`` extraction and resolution.

This is a best-effort line scan, not a preprocessor:

- only ``#import "X"`` and ``#import <X>`` are recognised, one per line
  (the greedy prefix means the last directive on a line wins);
- empty targets such as ``#import ""`` are skipped, since an empty suffix
  would match every header;
- imports inside comments or disabled ``#if`` blocks are still extracted;
- references are resolved by path suffix against the header universe,
  so ``"Sub/Foo.h"`` finds ``.../Project/Sub/Foo.h`` without knowing the
  importing file's directory.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

from .models import HeaderUniverse, ImportReference

logger = logging.getLogger(__name__)

IMPORT_PATTERN = re.compile(r'.*#import\s*("|<)([^">]*)')


def extract_imports(source: str) -> List[ImportReference]:
    """Return the import targets written in *source*, in line order."""
    references: List[ImportReference] = []
    for line in source.splitlines():
        match = IMPORT_PATTERN.search(line)
        if match and match.group(2):
            references.append(match.group(2))
    return references


def read_source(file_path: Path) -> str:
    return file_path.read_text(encoding="utf-8", errors="ignore")


def imports_in_file(file_path: Path) -> List[ImportReference]:
    return extract_imports(read_source(file_path))


def resolve_import(reference: ImportReference, universe: HeaderUniverse) -> Optional[Path]:
    """Map *reference* to a header of *universe*, or None.

    On a suffix tie the first header in universe order wins.
    """
    resolved = universe.resolve(reference)
    if resolved is None:
        logger.debug("Import not found/excluded: %s", reference)
    return resolved
