"""Filesystem boundary for the generators.

The generators only list directories, read pages and write files. Everything
goes through a ``FileSystem`` so tests can swap in an in-memory tree.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def list_dir(self, path: Path) -> list[str]:
        """Names of the immediate entries of ``path``, in enumeration order."""
        ...

    def is_dir(self, path: Path) -> bool:
        """True if ``path`` itself is a directory (symlinks are not followed)."""
        ...

    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, content: str) -> None:
        ...


class LocalFileSystem:
    """The real disk. OSErrors propagate to the caller."""

    encoding = "utf-8"

    def list_dir(self, path: Path) -> list[str]:
        return os.listdir(path)

    def is_dir(self, path: Path) -> bool:
        return stat.S_ISDIR(os.lstat(path).st_mode)

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding=self.encoding)
