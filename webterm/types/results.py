"""
Result Types

Types produced by command execution and consumed by the rendering layer.

Command Models:
    - CommandKind: Tag of a command result envelope
    - ProjectListPayload: Structured output of the `projects` command
    - CommandResult: The tagged `{kind, output}` envelope every handler returns
    - CommandSuggestion: A ranked completion candidate

Session Models:
    - HistoryEntry: One executed command with its result and directory
    - DetailsView: Tagged union of the details panel states
    - Preferences: Persisted volume/mute settings
    - SessionSnapshot: Persisted session state
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from webterm.types.projects import Project

# -----------------------------------------------------------------------------
# Command Models
# -----------------------------------------------------------------------------


class CommandKind(str, Enum):
    """Tag of a command result envelope."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    PROJECT_LIST = "project-list"
    WELCOME = "welcome"
    CLEAR = "clear"


class ProjectListPayload(BaseModel):
    """Structured output of the `projects` command."""

    projects: list[Project] = []


class CommandResult(BaseModel):
    """
    Result envelope returned by every command handler.

    `kind=project-list` carries a ProjectListPayload; every other kind
    carries a string (possibly empty).
    """

    model_config = ConfigDict(frozen=True)

    kind: CommandKind
    output: str | ProjectListPayload = ""

    @model_validator(mode="after")
    def _check_payload(self) -> "CommandResult":
        is_payload = isinstance(self.output, ProjectListPayload)
        if self.kind == CommandKind.PROJECT_LIST and not is_payload:
            raise ValueError("project-list results must carry a ProjectListPayload")
        if self.kind != CommandKind.PROJECT_LIST and is_payload:
            raise ValueError(f"{self.kind.value} results must carry a string")
        return self

    @classmethod
    def success(cls, output: str = "") -> "CommandResult":
        return cls(kind=CommandKind.SUCCESS, output=output)

    @classmethod
    def error(cls, output: str) -> "CommandResult":
        return cls(kind=CommandKind.ERROR, output=output)

    @classmethod
    def info(cls, output: str) -> "CommandResult":
        return cls(kind=CommandKind.INFO, output=output)

    @property
    def text(self) -> str:
        """Output as plain text; project lists render one `name: description` per line."""
        if isinstance(self.output, ProjectListPayload):
            return "\n".join(f"{p.name}: {p.description}" for p in self.output.projects)
        return self.output


class CommandSuggestion(BaseModel):
    """A completion candidate for partial input."""

    command: str
    score: float = 1.0


# -----------------------------------------------------------------------------
# Session Models
# -----------------------------------------------------------------------------


class HistoryEntry(BaseModel):
    """
    One executed command.

    Attributes:
        command: The command line as typed
        output: Handler output (string or project list)
        kind: Result kind
        directory: Current directory when the command was executed
    """

    command: str
    output: str | ProjectListPayload = ""
    kind: CommandKind
    directory: str = "/"


class NoDetails(BaseModel):
    view: Literal["none"] = "none"


class ProjectDetails(BaseModel):
    view: Literal["project"] = "project"
    project: Project


class FileDetails(BaseModel):
    view: Literal["file"] = "file"
    file_name: str
    content: str


DetailsView = Annotated[
    Union[NoDetails, ProjectDetails, FileDetails],
    Field(discriminator="view"),
]
"""State of the details panel: closed, showing a project, or showing a file."""


class Preferences(BaseModel):
    """Audio preferences that survive between sessions."""

    volume: float = Field(default=0.5, ge=0.0, le=1.0)
    muted: bool = False


class SessionSnapshot(BaseModel):
    """Persisted session state: history plus preferences."""

    history: list[HistoryEntry] = []
    preferences: Preferences = Field(default_factory=Preferences)
