"""Prepend import statements for the component tags used in generated JSX."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from pagegen.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

# Lexical scan only: a match inside a string literal or comment counts too.
TAG_RE = re.compile(r"<([A-Z][A-Za-z0-9_]*)")

FRAGMENT = "Fragment"
REACT_IMPORT = "import React from 'react'"
REACT_FRAGMENT_IMPORT = "import React, { Fragment } from 'react'"
COMPONENT_ROOT = "../../"  # generated files sit two levels below the components


def find_tag_references(text: str) -> list[str]:
    """Return component tag names in first-appearance order, deduplicated."""
    return ordered_unique(m.group(1) for m in TAG_RE.finditer(text))


def ordered_unique(names: Iterable[str]) -> list[str]:
    """Deduplicate names, keeping each at the index where it was first seen."""
    first_seen: dict[str, int] = {}
    for i, name in enumerate(names):
        first_seen.setdefault(name, i)
    return sorted(first_seen, key=first_seen.__getitem__)


def import_lines(references: list[str]) -> list[str]:
    """Build the import block for a list of tag references.

    The React import always comes first; ``Fragment`` is bound there instead
    of getting a line of its own.
    """
    base = REACT_FRAGMENT_IMPORT if FRAGMENT in references else REACT_IMPORT
    lines = [base]
    for name in references:
        if name == FRAGMENT:
            continue
        lines.append(f"import {name} from '{COMPONENT_ROOT}{name}'")
    return lines


def synthesize(text: str) -> str:
    """Return text with the import statements it needs prepended."""
    lines = import_lines(find_tag_references(text))
    return "\n".join(lines) + "\n" + text


def has_import_block(text: str) -> bool:
    """True if text already starts with the React import line."""
    return text.startswith((REACT_IMPORT + "\n", REACT_FRAGMENT_IMPORT + "\n"))


def synthesize_file(path: Path, fs: FileSystem | None = None) -> str:
    """Rewrite a generated file in place with its imports added.

    Returns the new content.
    """
    fs = fs or LocalFileSystem()
    content = synthesize(fs.read_text(path))
    fs.write_text(path, content)
    logger.debug("Added imports to %s", path)
    return content
