"""
Type Definitions

Pydantic models for all data structures.

Tree Models:
    - Node, NodeKind - Directories and files of the virtual tree
    - DirectoryEntry - A row of a directory listing
    - ExternalEntry - A descriptor from an externally fetched listing

Catalog Models:
    - Project, TechStackItem, ApiEndpoint, Architecture

Result Models:
    - CommandKind, CommandResult, ProjectListPayload - Command envelopes
    - CommandSuggestion - Completion candidates
    - HistoryEntry - Executed commands
    - DetailsView, NoDetails, ProjectDetails, FileDetails - Details panel state
    - Preferences, SessionSnapshot - Persisted state
"""

from webterm.types.nodes import DirectoryEntry, ExternalEntry, Node, NodeKind
from webterm.types.projects import (
    ApiEndpoint,
    Architecture,
    BackendArchitecture,
    FrontendArchitecture,
    Project,
    TechStackItem,
)
from webterm.types.results import (
    CommandKind,
    CommandResult,
    CommandSuggestion,
    DetailsView,
    FileDetails,
    HistoryEntry,
    NoDetails,
    Preferences,
    ProjectDetails,
    ProjectListPayload,
    SessionSnapshot,
)

__all__ = [
    # Tree Models
    "Node",
    "NodeKind",
    "DirectoryEntry",
    "ExternalEntry",
    # Catalog Models
    "Project",
    "TechStackItem",
    "ApiEndpoint",
    "Architecture",
    "FrontendArchitecture",
    "BackendArchitecture",
    # Result Models
    "CommandKind",
    "CommandResult",
    "ProjectListPayload",
    "CommandSuggestion",
    "HistoryEntry",
    "DetailsView",
    "NoDetails",
    "ProjectDetails",
    "FileDetails",
    "Preferences",
    "SessionSnapshot",
]
