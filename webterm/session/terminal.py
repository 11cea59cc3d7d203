"""
TerminalSession - Interactive Session State

Owns everything a terminal front end renders: command history, the
current directory, the suggestion list and the details panel. One session
is created per visitor and handed to the renderer; there is no module-level
state.

Example:
    >>> session = TerminalSession.create()
    >>> await session.execute_command("cd projects")
    >>> session.current_directory
    '/projects'
    >>> await session.execute_command("cat d4ut")
    >>> session.selected_project.name
    'D4UT'
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Literal

from webterm.commands.registry import CommandContext, execute, parse_command
from webterm.config import TerminalConfig
from webterm.data.projects import PROJECTS
from webterm.filesystem.sources import TreeSource
from webterm.filesystem.tree_sync import sync_tree
from webterm.filesystem.vfs import VirtualFileSystem
from webterm.suggestions import get_command_suggestions
from webterm.types.projects import Project
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
    SessionSnapshot,
)

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]


class TerminalSession:
    """
    State of one terminal session.

    Attributes:
        history: Every executed command, oldest first (never truncated)
        history_index: Recall cursor for up/down navigation (None = not recalling)
        current_directory: Mirror of the file system cursor
        details: Details panel state (closed, project, or file)
        suggestions: Completions for the current input
        selected_suggestion: Highlighted suggestion (-1 = none)
        preferences: Volume and mute settings
    """

    def __init__(
        self,
        vfs: VirtualFileSystem,
        projects: Sequence[Project] = PROJECTS,
        config: TerminalConfig | None = None,
    ) -> None:
        self.config = config or TerminalConfig()
        self.vfs = vfs
        self.projects = list(projects)
        self.context = CommandContext(vfs=vfs, projects=self.projects, config=self.config)

        self.history: list[HistoryEntry] = []
        self.history_index: int | None = None
        self.current_directory = vfs.path_string
        self.details: DetailsView = NoDetails()
        self.suggestions: list[str] = []
        self.selected_suggestion = -1
        self.preferences = Preferences(volume=self.config.default_volume)

        self._lock = asyncio.Lock()

    @classmethod
    def create(
        cls,
        projects: Sequence[Project] = PROJECTS,
        config: TerminalConfig | None = None,
    ) -> "TerminalSession":
        """Build a session over a freshly seeded file system."""
        config = config or TerminalConfig()
        vfs = VirtualFileSystem(projects, projects_dir=config.projects_dir)
        return cls(vfs, projects, config)

    # === Execution ===

    async def execute_command(self, line: str) -> CommandResult:
        """
        Run a command line and record it.

        Dispatches are serialized: a second call waits for the first to
        finish, so directory changes never interleave.
        """
        async with self._lock:
            command, args = parse_command(line)
            directory = self.vfs.path_string
            result = await execute(self.context, command, args)

            self.history.append(
                HistoryEntry(
                    command=line,
                    output=result.output,
                    kind=result.kind,
                    directory=directory,
                )
            )
            self.history_index = None
            self.current_directory = self.vfs.path_string
            self.dismiss_suggestions()

            if command.lower() == "cat" and args and result.kind == CommandKind.SUCCESS:
                project = self.find_project(args[0])
                if project is not None:
                    self.open_details_panel(project)
                else:
                    self.open_file_details(args[0], result.text)

            return result

    async def change_directory(self, path: str) -> bool:
        """
        Navigate (e.g. from a directory panel click) and log `cd <path>`.

        The history entry is added whether or not the navigation succeeded.
        """
        async with self._lock:
            directory = self.vfs.path_string
            moved = self.vfs.change_directory(path)
            if not moved:
                logger.debug(f"cd {path} failed, logging it anyway")
            self.current_directory = self.vfs.path_string
            self._append(f"cd {path}", directory=directory)
            return moved

    def add_command_only(self, command: str) -> None:
        """Record a command without running it (its effect was applied elsewhere)."""
        self._append(command, directory=self.vfs.path_string)

    def push_welcome(self) -> None:
        self.history.append(
            HistoryEntry(command="", kind=CommandKind.WELCOME, directory=self.vfs.path_string)
        )

    async def sync_tree(self, source: TreeSource) -> None:
        """Mirror an external tree into the file system (fails closed to an empty tree)."""
        async with self._lock:
            await sync_tree(self.vfs, source)
            self.current_directory = self.vfs.path_string

    def _append(self, command: str, directory: str) -> None:
        self.history.append(
            HistoryEntry(command=command, output="", kind=CommandKind.SUCCESS, directory=directory)
        )

    # === History ===

    def visible_history(self) -> list[HistoryEntry]:
        """Entries after the most recent `clear`; the full history is kept for recall."""
        for index in range(len(self.history) - 1, -1, -1):
            if self.history[index].kind == CommandKind.CLEAR:
                return self.history[index + 1:]
        return list(self.history)

    def navigate_history(self, direction: Direction) -> str:
        """
        Move the recall cursor and return the command text under it.

        "up" goes toward older entries, starting from the newest; "down"
        goes toward newer entries and stops at the newest.
        """
        if not self.history:
            return ""

        last = len(self.history) - 1
        if direction == "up":
            index = last if self.history_index is None else max(0, self.history_index - 1)
        else:
            current = -1 if self.history_index is None else self.history_index
            index = min(last, current + 1)

        self.history_index = index
        return self.history[index].command

    # === Suggestions ===

    def get_command_suggestions(self, prefix: str) -> list[CommandSuggestion]:
        return get_command_suggestions(prefix)

    def update_input(self, text: str) -> list[str]:
        """Recompute suggestions for the current input and reset the highlight."""
        self.suggestions = [s.command for s in self.get_command_suggestions(text)]
        self.selected_suggestion = -1
        return self.suggestions

    def move_suggestion(self, direction: Direction) -> str | None:
        """Move the highlight, wrapping at both ends."""
        if not self.suggestions:
            return None
        count = len(self.suggestions)
        if direction == "up":
            self.selected_suggestion = (
                count - 1 if self.selected_suggestion <= 0 else self.selected_suggestion - 1
            )
        else:
            self.selected_suggestion = (
                0 if self.selected_suggestion >= count - 1 else self.selected_suggestion + 1
            )
        return self.suggestions[self.selected_suggestion]

    def accept_suggestion(self) -> str | None:
        """Take the highlighted (or first) suggestion and close the list."""
        if not self.suggestions:
            return None
        index = self.selected_suggestion if self.selected_suggestion >= 0 else 0
        chosen = self.suggestions[index]
        self.dismiss_suggestions()
        return chosen

    def dismiss_suggestions(self) -> None:
        self.suggestions = []
        self.selected_suggestion = -1

    # === Details panel ===

    @property
    def is_details_panel_open(self) -> bool:
        return not isinstance(self.details, NoDetails)

    @property
    def selected_project(self) -> Project | None:
        return self.details.project if isinstance(self.details, ProjectDetails) else None

    @property
    def selected_file(self) -> FileDetails | None:
        return self.details if isinstance(self.details, FileDetails) else None

    def find_project(self, name: str) -> Project | None:
        """Case-insensitive catalog lookup."""
        needle = name.lower()
        return next((p for p in self.projects if p.name.lower() == needle), None)

    def open_details_panel(self, project: Project) -> None:
        self.details = ProjectDetails(project=project)

    def open_file_details(self, file_name: str, content: str) -> None:
        self.details = FileDetails(file_name=file_name, content=content)

    def close_details_panel(self) -> None:
        self.details = NoDetails()

    # === Persistence ===

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(history=list(self.history), preferences=self.preferences)

    def restore(self, snapshot: SessionSnapshot) -> None:
        """Load persisted history and preferences; the recall cursor starts fresh."""
        self.history = list(snapshot.history)
        self.preferences = snapshot.preferences
        self.history_index = None

    def set_volume(self, volume: float) -> None:
        self.preferences = Preferences(volume=volume, muted=self.preferences.muted)

    def toggle_mute(self) -> bool:
        self.preferences = Preferences(
            volume=self.preferences.volume, muted=not self.preferences.muted
        )
        return self.preferences.muted
