"""Write index.js files over the build tree.

The goal is that all pages of all groups (locales) can be imported with one
statement::

    import pages from 'path_to_build_dir'

so the build root gets an index re-exporting every group, and each group
gets an index re-exporting every page file in it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pagegen.config import IndexConfig
from pagegen.fs import FileSystem, LocalFileSystem
from pagegen.indexing.naming import validate_group
from pagegen.indexing.render import (
    group_entries,
    render_group_index,
    render_root_index,
    root_entries,
)
from pagegen.indexing.tree import read_tree
from pagegen.models import Group, IndexFile

logger = logging.getLogger(__name__)


def _write(fs: FileSystem, index_file: IndexFile) -> IndexFile:
    fs.write_text(index_file.path, index_file.content)
    logger.debug("Wrote %s (%d entries)", index_file.path, len(index_file.entries))
    return index_file


def write_root_index(
    fs: FileSystem, root: Path, group_names: list[str], config: IndexConfig
) -> IndexFile:
    return _write(
        fs,
        IndexFile(
            path=root / config.index_file,
            content=render_root_index(group_names),
            entries=root_entries(group_names),
        ),
    )


def write_group_index(fs: FileSystem, group: Group, config: IndexConfig) -> IndexFile:
    """Index one group directory. Nothing is written if a member is misnamed."""
    validate_group(group)
    return _write(
        fs,
        IndexFile(
            path=group.path / config.index_file,
            content=render_group_index(group.members, group=group.name),
            entries=group_entries(group.members),
        ),
    )


def synthesize_index(
    root: Path,
    fs: FileSystem | None = None,
    config: IndexConfig | None = None,
) -> list[IndexFile]:
    """Write the root index and one index per group under ``root``.

    Groups are processed in filesystem order. A NamingPolicyError aborts the
    run before the offending group's index is written; indexes already
    written during the run are left in place.

    Returns:
        The written index files, root first.
    """
    fs = fs or LocalFileSystem()
    config = config or IndexConfig()

    tree = read_tree(fs, Path(root), config.extension, config.index_file)
    logger.info("Indexing %s: %d groups", tree.root, len(tree.groups))

    written = [write_root_index(fs, tree.root, tree.group_names, config)]
    for group in tree.groups:
        written.append(write_group_index(fs, group, config))

    return written
