"""
Tree Synchronization

Converts an externally fetched hierarchical listing into the Node shape of
the virtual file system, and swaps it in.

Listing format (one level; `children` nests the same shape):
    {
        "src": {"kind": "directory", "path": "src", "children": {...}},
        "README.md": {"kind": "file", "path": "README.md", "size": 1204},
    }

`type` is accepted in place of `kind`, and `dir` in place of `directory`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from webterm.filesystem.sources import TreeSource
from webterm.filesystem.vfs import VirtualFileSystem
from webterm.types.nodes import ExternalEntry, Node, NodeKind

logger = logging.getLogger(__name__)


def convert_external_tree(tree: Mapping[str, Any], name: str = "/") -> Node:
    """
    Convert a listing into a directory Node.

    Directories are converted recursively, depth-first. Children are ordered
    with every directory before every file, each group sorted by name with a
    plain (case-sensitive) comparison. Files are created with empty content
    and marked as not loaded; their source path and size are kept for lazy
    loading.

    Raises:
        pydantic.ValidationError: If a descriptor is malformed
    """
    entries = {key: ExternalEntry.model_validate(value) for key, value in tree.items()}

    directories = sorted(key for key, entry in entries.items() if entry.kind == NodeKind.DIRECTORY)
    files = sorted(key for key, entry in entries.items() if entry.kind == NodeKind.FILE)

    children: list[Node] = []
    for key in directories:
        children.append(convert_external_tree(entries[key].children or {}, key))
    for key in files:
        entry = entries[key]
        children.append(
            Node(
                name=key,
                kind=NodeKind.FILE,
                content="",
                source_path=entry.path or key,
                size_hint=entry.size,
                loaded=False,
            )
        )

    return Node.directory(name, children)


async def sync_tree(vfs: VirtualFileSystem, source: TreeSource) -> Node:
    """
    Fetch the listing once and replace the VFS root with it.

    A failed fetch or a malformed listing degrades to an empty tree; the
    error is logged, never raised.

    Returns:
        The new root node
    """
    try:
        listing = await source.fetch_tree()
        root = convert_external_tree(listing)
    except Exception as e:
        logger.warning(f"Tree fetch failed, using an empty tree: {e}")
        root = Node.directory("/")
    else:
        logger.debug(f"Tree fetched with {len(root.children or {})} top-level entries")

    vfs.set_root_from_external_tree(root, source=source)
    return root
