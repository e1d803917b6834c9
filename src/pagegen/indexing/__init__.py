"""Module index synthesis: index.js files over a two-level build tree."""

from pagegen.indexing.synthesizer import synthesize_index
from pagegen.indexing.tree import read_tree

__all__ = ["read_tree", "synthesize_index"]
