"""
Virtual Filesystem

In-memory directory tree navigated by the terminal commands.

Modules:
    vfs: VirtualFileSystem (navigation, listing, content lookup)
    tree_sync: Conversion of external listings into nodes
    sources: Where external listings and lazy file content come from
"""

from webterm.filesystem.sources import (
    JsonTreeSource,
    LocalDirectoryTreeSource,
    StaticTreeSource,
    TreeSource,
    build_tree_snapshot,
)
from webterm.filesystem.tree_sync import convert_external_tree, sync_tree
from webterm.filesystem.vfs import VirtualFileSystem

__all__ = [
    "VirtualFileSystem",
    "convert_external_tree",
    "sync_tree",
    "TreeSource",
    "StaticTreeSource",
    "JsonTreeSource",
    "LocalDirectoryTreeSource",
    "build_tree_snapshot",
]
