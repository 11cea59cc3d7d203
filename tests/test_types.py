"""Tests for webterm type definitions."""

import pytest
from pydantic import TypeAdapter, ValidationError

from webterm.types import (
    CommandKind,
    CommandResult,
    DetailsView,
    ExternalEntry,
    FileDetails,
    HistoryEntry,
    NoDetails,
    Node,
    NodeKind,
    Preferences,
    Project,
    ProjectDetails,
    ProjectListPayload,
)


class TestNode:
    """Test the directory/file invariant of Node."""

    def test_directory_gets_empty_children(self):
        """Directories default to an empty children mapping and no content."""
        node = Node(name="src", kind=NodeKind.DIRECTORY)
        assert node.children == {}
        assert node.content is None
        assert node.is_directory

    def test_file_gets_empty_content(self):
        """Files default to empty content and no children."""
        node = Node(name="a.txt", kind=NodeKind.FILE)
        assert node.content == ""
        assert node.children is None
        assert not node.is_directory

    def test_directory_with_content_rejected(self):
        """A directory cannot carry content."""
        with pytest.raises(ValidationError):
            Node(name="src", kind=NodeKind.DIRECTORY, content="nope")

    def test_file_with_children_rejected(self):
        """A file cannot carry children."""
        with pytest.raises(ValidationError):
            Node(name="a.txt", kind=NodeKind.FILE, children={})

    def test_directory_factory_keys_children_by_name(self):
        """Node.directory keeps child order and keys by name."""
        node = Node.directory("/", [Node.file("b"), Node.directory("a")])
        assert list(node.children) == ["b", "a"]
        assert node.child("a").is_directory

    def test_add_child_to_file_raises(self):
        """Files cannot receive children."""
        with pytest.raises(ValueError):
            Node.file("a.txt").add_child(Node.file("b.txt"))

    def test_size(self):
        """Size is 0 for directories, content length for loaded files, hint otherwise."""
        assert Node.directory("d").size == 0
        assert Node.file("f", "hello").size == 5
        lazy = Node(name="g", kind=NodeKind.FILE, size_hint=42, loaded=False)
        assert lazy.size == 42


class TestExternalEntry:
    """Test normalization of external listing descriptors."""

    def test_type_alias_accepted(self):
        """`type` works in place of `kind`."""
        entry = ExternalEntry.model_validate({"type": "file", "size": 3})
        assert entry.kind == NodeKind.FILE

    def test_dir_alias_normalized(self):
        """`dir` and `folder` mean directory."""
        assert ExternalEntry.model_validate({"kind": "dir"}).kind == NodeKind.DIRECTORY
        assert ExternalEntry.model_validate({"type": "folder"}).kind == NodeKind.DIRECTORY

    def test_unknown_kind_rejected(self):
        """Kinds other than file/directory are rejected."""
        with pytest.raises(ValidationError):
            ExternalEntry.model_validate({"kind": "symlink"})


class TestCommandResult:
    """Test the result envelope."""

    def test_project_list_requires_payload(self):
        """project-list results carry a ProjectListPayload."""
        with pytest.raises(ValidationError):
            CommandResult(kind=CommandKind.PROJECT_LIST, output="text")

    def test_string_kinds_reject_payload(self):
        """Other kinds carry strings."""
        with pytest.raises(ValidationError):
            CommandResult(kind=CommandKind.SUCCESS, output=ProjectListPayload())

    def test_text_of_project_list(self):
        """Project lists render as name: description lines."""
        payload = ProjectListPayload(projects=[Project(name="A", description="first")])
        result = CommandResult(kind=CommandKind.PROJECT_LIST, output=payload)
        assert result.text == "A: first"

    def test_factories(self):
        """success/error/info set the matching kind."""
        assert CommandResult.success("ok").kind == CommandKind.SUCCESS
        assert CommandResult.error("bad").kind == CommandKind.ERROR
        assert CommandResult.info("fyi").kind == CommandKind.INFO

    def test_frozen(self):
        """Envelopes are immutable."""
        result = CommandResult.success("ok")
        with pytest.raises(ValidationError):
            result.output = "changed"


class TestDetailsView:
    """Test the details panel tagged union."""

    def test_discriminated_by_view(self):
        """The `view` tag selects the variant."""
        adapter = TypeAdapter(DetailsView)
        assert isinstance(adapter.validate_python({"view": "none"}), NoDetails)
        file_view = adapter.validate_python(
            {"view": "file", "file_name": "a.txt", "content": "hi"}
        )
        assert isinstance(file_view, FileDetails)
        project_view = adapter.validate_python(
            {"view": "project", "project": {"name": "A", "description": "d"}}
        )
        assert isinstance(project_view, ProjectDetails)
        assert project_view.project.name == "A"


class TestPersistedModels:
    """Test the models that are written to disk."""

    def test_volume_bounds(self):
        """Volume must lie in [0, 1]."""
        with pytest.raises(ValidationError):
            Preferences(volume=1.5)

    def test_history_entry_restores_project_list(self):
        """A dumped project-list entry validates back into a payload."""
        payload = ProjectListPayload(projects=[Project(name="A", description="d")])
        entry = HistoryEntry(command="projects", output=payload, kind=CommandKind.PROJECT_LIST)
        restored = HistoryEntry.model_validate(entry.model_dump(mode="json"))
        assert isinstance(restored.output, ProjectListPayload)
        assert restored.output.projects[0].name == "A"
