"""Configuration loading and defaults."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from pagegen.models import DEFAULT_EXTENSION, DEFAULT_INDEX_FILE

BUILD_DIR_ENV = "PAGEGEN_BUILD_DIR"


@dataclass
class BuildConfig:
    dir: str = ""

    def resolve_dir(self) -> Path:
        """Get the build root from config, env var, or the default."""
        if self.dir:
            return Path(self.dir)
        env_dir = os.environ.get(BUILD_DIR_ENV, "")
        if env_dir:
            return Path(env_dir)
        return Path("build")


@dataclass
class IndexConfig:
    extension: str = DEFAULT_EXTENSION
    index_file: str = DEFAULT_INDEX_FILE


@dataclass
class PagegenConfig:
    build: BuildConfig = field(default_factory=BuildConfig)
    index: IndexConfig = field(default_factory=IndexConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> PagegenConfig:
        """Load config from pagegen.toml, falling back to defaults."""
        if path is None:
            path = Path("pagegen.toml")
        if not path.exists():
            return cls()

        with open(path, "rb") as f:
            raw = tomllib.load(f)

        config = cls()

        if "build" in raw:
            b = raw["build"]
            config.build = BuildConfig(dir=b.get("dir", config.build.dir))

        if "index" in raw:
            i = raw["index"]
            config.index = IndexConfig(
                extension=i.get("extension", config.index.extension),
                index_file=i.get("index_file", config.index.index_file),
            )

        return config


DEFAULT_CONFIG_TEMPLATE = """\
[build]
# falls back to PAGEGEN_BUILD_DIR env, then "build"
dir = ""

[index]
extension = ".js"
index_file = "index.js"
"""
