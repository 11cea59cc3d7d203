"""
Tree Sources

Where the mirrored directory tree comes from. A source supplies a
hierarchical listing (name -> {kind, size, path, children}) in one read,
and file content on demand.

Sources:
    - StaticTreeSource: An in-memory listing
    - JsonTreeSource: A snapshot file written by build_tree_snapshot
    - LocalDirectoryTreeSource: A directory on disk, with exclusion filtering
"""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {
    ".py", ".js", ".ts", ".tsx", ".jsx", ".json", ".md", ".css", ".scss", ".html",
    ".txt", ".yml", ".yaml", ".toml", ".ini", ".cfg", ".xml", ".svg", ".sh", ".lock",
}

BINARY_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".pdf", ".zip", ".tar", ".gz", ".7z",
    ".mp3", ".mp4", ".mov", ".webm", ".woff", ".woff2", ".ttf", ".otf", ".exe",
    ".dll", ".so", ".dylib", ".class", ".jar", ".pyc",
}


class TreeSource(ABC):
    """
    Abstract interface for tree sources.

    Lifecycle:
        listing = await source.fetch_tree()      # once per session
        content = await source.read_file(path)  # lazily, per file
    """

    @abstractmethod
    async def fetch_tree(self) -> dict[str, Any]:
        """Return the full hierarchical listing."""
        ...

    @abstractmethod
    async def read_file(self, path: str) -> str:
        """Return the content of the file at `path` (as given in the listing)."""
        ...


class StaticTreeSource(TreeSource):
    """A listing held in memory. File content may be supplied separately."""

    def __init__(self, tree: dict[str, Any], contents: dict[str, str] | None = None) -> None:
        self._tree = tree
        self._contents = contents or {}

    async def fetch_tree(self) -> dict[str, Any]:
        return self._tree

    async def read_file(self, path: str) -> str:
        if path not in self._contents:
            raise FileNotFoundError(f"File not found: {path}")
        return self._contents[path]


class JsonTreeSource(TreeSource):
    """
    A listing stored as a JSON snapshot.

    File entries in the snapshot may carry their `content`; read_file serves
    it from there.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._tree: dict[str, Any] | None = None

    async def fetch_tree(self) -> dict[str, Any]:
        if self._tree is None:
            text = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
            data = json.loads(text)
            if not isinstance(data, dict):
                raise ValueError(f"Tree snapshot must be a JSON object: {self.path}")
            self._tree = data
        return self._tree

    async def read_file(self, path: str) -> str:
        tree = await self.fetch_tree()
        entry = _find_entry(tree, path)
        if entry is None or "content" not in entry:
            raise FileNotFoundError(f"File not found in snapshot: {path}")
        return str(entry["content"])


class LocalDirectoryTreeSource(TreeSource):
    """
    A directory on disk.

    Hidden entries, excluded names and binary files are skipped. When
    include lists are given, only those top-level directories and files
    are mirrored.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        include_dirs: Iterable[str] = (),
        include_files: Iterable[str] = (),
        exclude_names: Iterable[str] = ("node_modules", "build", "dist", "__pycache__", ".git"),
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.include_dirs = list(include_dirs)
        self.include_files = list(include_files)
        self.exclude_names = set(exclude_names)

    async def fetch_tree(self) -> dict[str, Any]:
        if not self.root.is_dir():
            raise FileNotFoundError(f"Tree root not found: {self.root}")
        return await asyncio.to_thread(self._scan_root)

    async def read_file(self, path: str) -> str:
        full = (self.root / path).resolve()
        if not full.is_relative_to(self.root) or not full.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return await asyncio.to_thread(full.read_text, encoding="utf-8", errors="replace")

    def _scan_root(self) -> dict[str, Any]:
        if not self.include_dirs and not self.include_files:
            return self._scan(self.root)

        tree: dict[str, Any] = {}
        for name in self.include_dirs:
            full = self.root / name
            if full.is_dir():
                tree[name] = {"kind": "directory", "path": name, "children": self._scan(full)}
        for name in self.include_files:
            full = self.root / name
            if full.is_file() and not is_binary_file(full):
                tree[name] = {"kind": "file", "path": name, "size": full.stat().st_size}
        return tree

    def _scan(self, directory: Path) -> dict[str, Any]:
        children: dict[str, Any] = {}
        try:
            entries = sorted(directory.iterdir())
        except PermissionError:
            logger.warning(f"Permission denied, skipping {directory}")
            return children

        for entry in entries:
            if entry.name.startswith(".") or entry.name in self.exclude_names:
                continue
            rel_path = entry.relative_to(self.root).as_posix()
            if entry.is_dir():
                children[entry.name] = {
                    "kind": "directory",
                    "path": rel_path,
                    "children": self._scan(entry),
                }
            elif entry.is_file() and not is_binary_file(entry):
                children[entry.name] = {
                    "kind": "file",
                    "path": rel_path,
                    "size": entry.stat().st_size,
                }
        return children


def is_binary_file(path: Path) -> bool:
    """Guess whether a file is binary from its extension, then its first bytes."""
    suffix = path.suffix.lower()
    if suffix in TEXT_EXTENSIONS:
        return False
    if suffix in BINARY_EXTENSIONS:
        return True
    try:
        with open(path, "rb") as f:
            return b"\x00" in f.read(512)
    except OSError:
        return True


async def build_tree_snapshot(
    source: LocalDirectoryTreeSource,
    output: str | Path,
    *,
    include_content: bool = True,
) -> int:
    """
    Write a JSON snapshot of a local directory for JsonTreeSource.

    Returns:
        Number of files written to the snapshot
    """
    tree = await source.fetch_tree()
    count = 0

    async def _fill(children: dict[str, Any]) -> None:
        nonlocal count
        for entry in children.values():
            if entry["kind"] == "directory":
                await _fill(entry["children"])
                continue
            count += 1
            if include_content:
                entry["content"] = await source.read_file(entry["path"])

    await _fill(tree)

    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(tree, indent=2), encoding="utf-8")
    logger.info(f"Tree snapshot with {count} files written to {output}")
    return count


def _find_entry(tree: dict[str, Any], path: str) -> dict[str, Any] | None:
    parts = [part for part in path.split("/") if part]
    children: dict[str, Any] | None = tree
    entry: dict[str, Any] | None = None
    for part in parts:
        if not isinstance(children, dict) or part not in children:
            return None
        entry = children[part]
        children = entry.get("children") if isinstance(entry, dict) else None
    return entry
