"""
Node Types

Nodes make up the virtual directory tree navigated by the terminal.

Tree Models:
    - NodeKind: Directory or file
    - Node: A directory (with children) or a file (with content)
    - DirectoryEntry: One row of a directory listing

External Listing Models (used during tree synchronization):
    - ExternalEntry: A single descriptor from an externally fetched listing
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator


class NodeKind(str, Enum):
    """Node classification."""

    DIRECTORY = "directory"
    FILE = "file"


class Node(BaseModel):
    """
    A directory or file in the virtual tree.

    A node's kind determines which of `children` and `content` is populated:
    directories always carry `children` and never `content`, files always
    carry `content` (possibly empty) and never `children`.

    Attributes:
        name: Identifier, unique among siblings
        kind: Directory or file
        content: File body (files only)
        children: Mapping of child name to node (directories only)
        source_path: Path of the file in the external source, for lazy loading
        size_hint: Size reported by the external listing before content is loaded
        loaded: False while the content still has to be fetched from the source
    """

    name: str
    kind: NodeKind
    content: str | None = None
    children: dict[str, Node] | None = None
    source_path: str | None = None
    size_hint: int | None = None
    loaded: bool = True

    @model_validator(mode="before")
    @classmethod
    def _fill_kind_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict):
            kind = data.get("kind")
            if kind in (NodeKind.DIRECTORY, "directory") and data.get("children") is None:
                data = {**data, "children": {}}
            elif kind in (NodeKind.FILE, "file") and data.get("content") is None:
                data = {**data, "content": ""}
        return data

    @model_validator(mode="after")
    def _check_kind_invariant(self) -> Node:
        if self.kind == NodeKind.DIRECTORY:
            if self.content is not None:
                raise ValueError(f"Directory '{self.name}' cannot carry content")
        elif self.children is not None:
            raise ValueError(f"File '{self.name}' cannot carry children")
        return self

    @classmethod
    def directory(cls, name: str, children: list[Node] | None = None) -> Node:
        """Build a directory node from a list of children."""
        return cls(
            name=name,
            kind=NodeKind.DIRECTORY,
            children={child.name: child for child in children or []},
        )

    @classmethod
    def file(cls, name: str, content: str = "") -> Node:
        """Build a file node with in-memory content."""
        return cls(name=name, kind=NodeKind.FILE, content=content)

    @property
    def is_directory(self) -> bool:
        return self.kind == NodeKind.DIRECTORY

    @property
    def size(self) -> int:
        """Listing size: 0 for directories, content length for files."""
        if self.is_directory:
            return 0
        if not self.loaded and self.size_hint is not None:
            return self.size_hint
        return len(self.content or "")

    def child(self, name: str) -> Node | None:
        """Return the named child, or None for files and missing names."""
        if self.children is None:
            return None
        return self.children.get(name)

    def add_child(self, node: Node) -> None:
        if self.children is None:
            raise ValueError(f"Cannot add '{node.name}' to file '{self.name}'")
        self.children[node.name] = node


class DirectoryEntry(BaseModel):
    """One row of a directory listing."""

    name: str
    kind: NodeKind
    size: int = 0


class ExternalEntry(BaseModel):
    """
    A descriptor from an externally fetched hierarchical listing.

    Accepts both `kind` and `type` keys, and `dir` as a directory alias,
    so listings produced by different fetchers convert the same way.
    """

    kind: NodeKind = Field(validation_alias=AliasChoices("kind", "type"))
    size: int | None = None
    path: str | None = None
    children: dict[str, Any] | None = None
    content: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        if isinstance(value, str) and value.lower() in ("dir", "folder"):
            return NodeKind.DIRECTORY
        if isinstance(value, str) and value.lower() == "blob":
            return NodeKind.FILE
        return value
