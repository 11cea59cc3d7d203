"""
Virtual File System

In-memory directory tree with a current-path cursor. The tree is seeded
with built-in files and one synthesized file per catalog project, and can be
replaced wholesale by a tree mirrored from an external listing.

Seeded layout:
    /
    ├── about.txt
    └── projects/
        └── {project name, lowercased}

Example:
    >>> vfs = VirtualFileSystem()
    >>> vfs.change_directory("projects")
    True
    >>> vfs.path_string
    '/projects'
    >>> vfs.get_file_content("about.txt") is None
    False
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from webterm.data.projects import ABOUT_TEXT, PROJECTS
from webterm.types.nodes import DirectoryEntry, Node, NodeKind
from webterm.types.projects import Project

if TYPE_CHECKING:
    from webterm.filesystem.sources import TreeSource

logger = logging.getLogger(__name__)

ROOT_ALIASES = ("/", "", "~")


class VirtualFileSystem:
    """
    A navigable in-memory tree.

    `current_path` holds the segments from the root to the current
    directory and always resolves to a directory: navigation that would
    leave it dangling is rejected, and tree replacement re-validates it.
    """

    def __init__(
        self,
        projects: Sequence[Project] | None = None,
        *,
        about_text: str = ABOUT_TEXT,
        projects_dir: str = "projects",
    ) -> None:
        """
        Build the seeded tree.

        Args:
            projects: Catalog to synthesize under the projects directory
                (default: the built-in catalog)
            about_text: Content of /about.txt
            projects_dir: Name of the root-level project directory
        """
        self.projects_dir = projects_dir
        self.root = Node.directory(
            "/",
            [
                Node.file("about.txt", about_text),
                Node.directory(projects_dir),
            ],
        )
        self.current_path: list[str] = []
        self._source: TreeSource | None = None
        self.add_project_files(PROJECTS if projects is None else projects)

    # -------------------------------------------------------------------------
    # Cursor
    # -------------------------------------------------------------------------

    @property
    def path_string(self) -> str:
        """Current directory as an absolute path ("/" at the root)."""
        return "/" + "/".join(self.current_path)

    def get_current_directory(self) -> Node:
        """Return the node the cursor points at."""
        segments = self._walk_directories([], self.current_path)
        if segments is None:
            # Only reachable if the tree was mutated behind our back
            logger.warning(f"Current path {self.path_string} no longer resolves, resetting to /")
            self.current_path = []
            return self.root
        return self._node_at(segments)

    def change_directory(self, target: str) -> bool:
        """
        Move the cursor.

        ".." pops one segment (a no-op at the root), "/" (or "~", or an
        empty string) resets to the root, anything else is resolved segment
        by segment from the current directory, or from the root when it
        starts with "/". Every segment must name an existing directory.

        Returns:
            True if the cursor moved (or legitimately stayed), False otherwise.
            The cursor is only changed on success.
        """
        target = target.strip()
        logger.debug(f"cd {target!r} from {self.path_string}")

        if target == "..":
            if self.current_path:
                self.current_path.pop()
            return True

        if target in ROOT_ALIASES:
            self.current_path = []
            return True

        start = [] if target.startswith("/") else list(self.current_path)
        new_path = self._walk_directories(start, _split(target))
        if new_path is None:
            logger.debug(f"Directory not found: {target} in {self.path_string}")
            return False

        self.current_path = new_path
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_directory(self) -> list[DirectoryEntry]:
        """
        List the immediate children of the current directory.

        Directories come first, then files, each group sorted by name.
        """
        current = self.get_current_directory()
        entries = [
            DirectoryEntry(name=name, kind=child.kind, size=child.size)
            for name, child in (current.children or {}).items()
        ]
        entries.sort(key=lambda e: (not _is_dir_kind(e), e.name.lower(), e.name))
        return entries

    def resolve(self, path: str) -> Node | None:
        """Resolve a file or directory path relative to the current directory."""
        parts = _split(path)
        if not parts:
            return self.root if path.strip().startswith("/") else self.get_current_directory()

        start = [] if path.strip().startswith("/") else list(self.current_path)
        parent = self._walk_directories(start, parts[:-1])
        if parent is None:
            return None

        name = parts[-1]
        if name == "..":
            return self._node_at(parent[:-1])
        if name == ".":
            return self._node_at(parent)
        return self._node_at(parent).child(name)

    def get_file_content(self, path: str) -> str | None:
        """
        Look up a file's content.

        Resolves against the current directory first, then falls back to
        the projects directory. Returns None when no file matches.
        """
        node = self._find_file(path)
        return node.content if node is not None else None

    async def read_file(self, path: str) -> str | None:
        """
        Look up a file's content, fetching it from the tree source if needed.

        Files mirrored from an external listing start out empty; their
        content is loaded once and cached on the node.
        """
        node = self._find_file(path)
        if node is None:
            return None

        if not node.loaded and self._source is not None:
            source_path = node.source_path or path
            try:
                node.content = await self._source.read_file(source_path)
            except Exception as e:
                logger.warning(f"Failed to load {source_path}: {e}")
                return None
            node.loaded = True

        return node.content

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_project_files(self, catalog: Sequence[Project]) -> None:
        """Synthesize one file per project under the projects directory."""
        projects_node = self.root.child(self.projects_dir)
        if projects_node is None or not projects_node.is_directory:
            projects_node = Node.directory(self.projects_dir)
            self.root.add_child(projects_node)

        for project in catalog:
            content = f"{project.name}\n{project.description}\n\n{project.overview}"
            projects_node.add_child(Node.file(project.file_name, content))

    def set_root_from_external_tree(self, tree: Node, source: TreeSource | None = None) -> None:
        """
        Replace the whole tree.

        The current path is kept if it still resolves to a directory in the
        new tree, otherwise it is reset to the root.

        Args:
            tree: New root (must be a directory)
            source: Where lazily loaded file content comes from
        """
        if not tree.is_directory:
            raise ValueError("Tree root must be a directory")

        self.root = tree
        self._source = source

        if self._walk_directories([], self.current_path) is None:
            logger.debug(f"{self.path_string} missing from the new tree, resetting to /")
            self.current_path = []

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _node_at(self, segments: list[str]) -> Node:
        node = self.root
        for segment in segments:
            child = node.child(segment)
            if child is None:
                raise KeyError(segment)
            node = child
        return node

    def _walk_directories(self, start: list[str], parts: list[str]) -> list[str] | None:
        """Follow `parts` from `start`; None if any step is not a directory."""
        path = list(start)
        try:
            node = self._node_at(path)
        except KeyError:
            return None

        for part in parts:
            if part == ".":
                continue
            if part == "..":
                if path:
                    path.pop()
                    node = self._node_at(path)
                continue
            child = node.child(part)
            if child is None or not child.is_directory:
                return None
            path.append(part)
            node = child
        return path

    def _find_file(self, path: str) -> Node | None:
        node = self.resolve(path)
        if node is not None and not node.is_directory:
            return node

        projects_node = self.root.child(self.projects_dir)
        if projects_node is None:
            return None
        for name in (path, path.lower()):
            candidate = projects_node.child(name)
            if candidate is not None and not candidate.is_directory:
                return candidate
        return None


def _split(path: str) -> list[str]:
    return [part for part in path.strip().split("/") if part]


def _is_dir_kind(entry: DirectoryEntry) -> bool:
    return entry.kind == NodeKind.DIRECTORY
