"""Post-compile pipeline: add imports to every page, then index the build tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pagegen.config import PagegenConfig
from pagegen.fs import FileSystem
from pagegen.models import IndexFile

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Files touched by one run of the pipeline."""

    root: Path
    page_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)  # already had imports
    index_files: list[IndexFile] = field(default_factory=list)


def run_build(
    config: PagegenConfig,
    *,
    fs: FileSystem | None = None,
    root: Path | None = None,
) -> BuildResult:
    """Synthesize imports for every page file, then write the index files.

    All member names are checked before any page is touched, so a naming
    error leaves the build tree unchanged. Pages that already start with the
    React import are skipped, which makes re-running on the same tree a no-op.
    """
    from pagegen.fs import LocalFileSystem
    from pagegen.imports import has_import_block, synthesize
    from pagegen.indexing.naming import validate_group
    from pagegen.indexing.synthesizer import synthesize_index
    from pagegen.indexing.tree import read_tree

    fs = fs or LocalFileSystem()
    root = Path(root or config.build.resolve_dir())
    result = BuildResult(root=root)

    tree = read_tree(fs, root, config.index.extension, config.index.index_file)
    for group in tree.groups:
        validate_group(group)

    # ── Imports: one rewrite per page, index files excluded ─────────────
    for group in tree.groups:
        for page in group.member_paths:
            text = fs.read_text(page)
            if has_import_block(text):
                result.skipped_files.append(page)
                continue
            fs.write_text(page, synthesize(text))
            result.page_files.append(page)
    logger.info(
        "Added imports to %d page files (%d already done)",
        len(result.page_files),
        len(result.skipped_files),
    )

    # ── Indexes ─────────────────────────────────────────────────────────
    result.index_files = synthesize_index(root, fs=fs, config=config.index)
    return result
