"""Read the depth-2 build tree: root -> groups -> members."""

from __future__ import annotations

from pathlib import Path

from pagegen.errors import DuplicateMemberError
from pagegen.fs import FileSystem
from pagegen.models import DEFAULT_EXTENSION, DEFAULT_INDEX_FILE, Group, ModuleTree


def _strip_extension(filename: str, extension: str) -> str | None:
    """Base name of ``filename`` if it has ``extension`` (case-insensitive)."""
    if not filename.lower().endswith(extension.lower()):
        return None
    return filename[: len(filename) - len(extension)]


def list_groups(fs: FileSystem, root: Path) -> list[str]:
    """Immediate subdirectories of root, in filesystem order (not sorted)."""
    return [name for name in fs.list_dir(root) if fs.is_dir(root / name)]


def member_files(
    fs: FileSystem,
    group_dir: Path,
    extension: str = DEFAULT_EXTENSION,
    index_file: str = DEFAULT_INDEX_FILE,
) -> dict[str, str]:
    """Map base name -> file name for the generated files in a group directory.

    The existing index file and entries with another extension are skipped.
    Keys are sorted. Raises DuplicateMemberError if two files strip to the
    same base name (e.g. ``Intro.js`` and ``Intro.JS``).
    """
    files: dict[str, str] = {}
    for filename in fs.list_dir(group_dir):
        if filename == index_file:
            continue
        base = _strip_extension(filename, extension)
        if base is None:
            continue
        if base in files:
            raise DuplicateMemberError(
                base, sorted([files[base], filename]), group=Path(group_dir).name
            )
        files[base] = filename
    return dict(sorted(files.items()))


def read_tree(
    fs: FileSystem,
    root: Path,
    extension: str = DEFAULT_EXTENSION,
    index_file: str = DEFAULT_INDEX_FILE,
) -> ModuleTree:
    """Snapshot the whole build tree without validating member names."""
    root = Path(root)
    groups = [
        Group(
            name=name,
            path=root / name,
            files=member_files(fs, root / name, extension, index_file),
        )
        for name in list_groups(fs, root)
    ]
    return ModuleTree(root=root, groups=groups)
