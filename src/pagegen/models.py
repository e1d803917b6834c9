"""All shared data models for pagegen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# ── Naming policy ───────────────────────────────────────────────────────────


class NamingRule(Enum):
    """A rule of the member naming policy, checked in declaration order."""

    NOT_EMPTY = "Page name is empty"
    ALLOWED_SYMBOLS = "Page name contains illegal symbols"
    LATIN_CAPITAL = "Page name should start with a latin capital letter"

    @property
    def message(self) -> str:
        return self.value


# ── Build tree ──────────────────────────────────────────────────────────────

DEFAULT_EXTENSION = ".js"
DEFAULT_INDEX_FILE = "index.js"


@dataclass
class Group:
    """An immediate subdirectory of the build root (e.g. a locale)."""

    name: str
    path: Path
    files: dict[str, str] = field(default_factory=dict)  # base name -> file name, sorted

    @property
    def members(self) -> list[str]:
        return list(self.files)

    @property
    def member_paths(self) -> list[Path]:
        return [self.path / filename for filename in self.files.values()]


@dataclass
class ModuleTree:
    """The fixed depth-2 build tree: root -> groups -> members."""

    root: Path
    groups: list[Group] = field(default_factory=list)  # enumeration order

    @property
    def group_names(self) -> list[str]:
        return [g.name for g in self.groups]


# ── Generated output ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ModuleEntry:
    """One key -> module pair of an index file's default export."""

    key: str
    name: str

    @property
    def source(self) -> str:
        return f"./{self.name}"

    @property
    def is_shorthand(self) -> bool:
        return self.key == self.name


@dataclass
class IndexFile:
    """A generated aggregation file."""

    path: Path
    content: str
    entries: list[ModuleEntry] = field(default_factory=list)
