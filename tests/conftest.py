"""Shared fixtures for pagegen tests."""

from __future__ import annotations

from pathlib import Path

import pytest


class MemoryFileSystem:
    """In-memory stand-in for LocalFileSystem.

    Directories map to insertion-ordered dicts of children; files map to their
    text content.
    """

    def __init__(self) -> None:
        self.tree: dict = {}
        self.writes: list[Path] = []

    def _node(self, path: Path):
        node = self.tree
        for part in Path(path).parts:
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(str(path))
            node = node[part]
        return node

    def add_dir(self, path: str) -> None:
        node = self.tree
        for part in Path(path).parts:
            node = node.setdefault(part, {})

    def add_file(self, path: str, content: str = "") -> None:
        p = Path(path)
        self.add_dir(str(p.parent))
        self._node(p.parent)[p.name] = content

    def read_text(self, path: Path) -> str:
        node = self._node(path)
        assert isinstance(node, str), f"{path} is a directory"
        return node

    def list_dir(self, path: Path) -> list[str]:
        node = self._node(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(str(path))
        return list(node)

    def is_dir(self, path: Path) -> bool:
        return isinstance(self._node(path), dict)

    def write_text(self, path: Path, content: str) -> None:
        parent = self._node(Path(path).parent)
        if not isinstance(parent, dict):
            raise NotADirectoryError(str(path))
        parent[Path(path).name] = content
        self.writes.append(Path(path))


@pytest.fixture
def memfs() -> MemoryFileSystem:
    """A build tree with two locales, one of them holding a stale index."""
    fs = MemoryFileSystem()
    fs.add_file("build/en/Contact.js", "contact")
    fs.add_file("build/en/About.js", "about")
    fs.add_file("build/en/index.js", "stale")
    fs.add_file("build/ru/Skills.js", "skills")
    fs.add_file("build/ru/notes.txt", "ignored")
    fs.add_file("build/README.md", "not a group")
    return fs


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """A real on-disk build tree with two locales."""
    root = tmp_path / "build"
    for locale, pages in {"en": ["About", "Contact"], "ru": ["About", "Skills"]}.items():
        (root / locale).mkdir(parents=True)
        for page in pages:
            (root / locale / f"{page}.js").write_text(
                f"class Page__{page} extends React.Component {{\n"
                f"  render() {{\n    return <Fragment><Link to='/' /></Fragment>\n  }}\n}}\n"
            )
    (root / "build.log").write_text("compiler output\n")
    return root
