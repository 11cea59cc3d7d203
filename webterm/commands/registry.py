"""
Command Registry

Fixed command table for the terminal. Every handler is a stateless
coroutine taking the command context and its arguments and returning a
CommandResult envelope:

    help                 Show the command summary
    clear                Clear the screen (history is kept)
    about                About this terminal
    projects             List the project catalog
    contact              Contact information
    ls                   List the current directory
    cd <directory>       Change directory
    pwd                  Print working directory
    cat <filename>       Show a file or project
    echo <text...>       Print text
    neofetch             System information
    exit                 Say goodbye

Verbs are matched case-insensitively; arguments are passed through as typed.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field

from webterm.config import TerminalConfig
from webterm.data.projects import ABOUT_TEXT
from webterm.filesystem.vfs import VirtualFileSystem
from webterm.suggestions import fuzzy_suggestions
from webterm.types.nodes import NodeKind
from webterm.types.projects import Project
from webterm.types.results import CommandKind, CommandResult, ProjectListPayload

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """What a handler may read or navigate."""

    vfs: VirtualFileSystem
    projects: Sequence[Project] = ()
    config: TerminalConfig = field(default_factory=TerminalConfig)


Handler = Callable[[CommandContext, list[str]], Awaitable[CommandResult]]


# =============================================================================
# Command Parsing
# =============================================================================

def parse_command(line: str) -> tuple[str, list[str]]:
    """Split a command line on whitespace into verb and arguments."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


# =============================================================================
# Commands
# =============================================================================

HELP_TEXT = """Available commands:
  help        - Show this help message
  clear       - Clear the terminal
  about       - Show information about the terminal
  projects    - List available projects
  contact     - Show contact information
  ls          - List directory contents
  cd          - Change directory
  pwd         - Print working directory
  cat         - Read file contents
  echo        - Print text
  neofetch    - Display system information
  exit        - Close the terminal"""

CONTACT_TEXT = """GitHub: https://github.com/username
Email: user@example.com
LinkedIn: https://linkedin.com/in/username"""


async def cmd_help(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult.success(HELP_TEXT)


async def cmd_clear(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult(kind=CommandKind.CLEAR, output="")


async def cmd_about(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult.success(ABOUT_TEXT)


async def cmd_projects(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult(
        kind=CommandKind.PROJECT_LIST,
        output=ProjectListPayload(projects=list(ctx.projects)),
    )


async def cmd_contact(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult.success(CONTACT_TEXT)


async def cmd_ls(ctx: CommandContext, args: list[str]) -> CommandResult:
    """List the current directory as `<d|-> <size> <name>` rows."""
    entries = ctx.vfs.list_directory()
    if not entries:
        return CommandResult.success("Directory is empty")

    width = max(len(str(entry.size)) for entry in entries)
    lines = [
        f"{'d' if entry.kind == NodeKind.DIRECTORY else '-'} {str(entry.size).ljust(width)} {entry.name}"
        for entry in entries
    ]
    return CommandResult.success("\n".join(lines))


async def cmd_cd(ctx: CommandContext, args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.error("Usage: cd <directory>")
    if not ctx.vfs.change_directory(args[0]):
        return CommandResult.error(f"Directory not found: {args[0]}")
    return CommandResult.success("")


async def cmd_pwd(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult.success(ctx.vfs.path_string)


async def cmd_cat(ctx: CommandContext, args: list[str]) -> CommandResult:
    """Show a file; falls back to the projects directory for project names."""
    if not args:
        return CommandResult.error("Usage: cat <filename>")
    content = await ctx.vfs.read_file(args[0])
    if content is None:
        return CommandResult.error(f"File not found: {args[0]}")
    return CommandResult.success(content)


async def cmd_echo(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult.success(" ".join(args))


async def cmd_neofetch(ctx: CommandContext, args: list[str]) -> CommandResult:
    config = ctx.config
    lines = [
        f"{config.user}@{config.hostname}",
        "-" * len(f"{config.user}@{config.hostname}"),
        f"OS: {platform.system() or 'Unknown'} {platform.release()}".rstrip(),
        f"Host: {platform.node() or 'localhost'}",
        f"Runtime: Python {platform.python_version()}",
        f"Terminal: v{config.version}",
        "Shell: webterm",
        f"Theme: {config.theme}",
    ]
    return CommandResult.success("\n".join(lines))


async def cmd_exit(ctx: CommandContext, args: list[str]) -> CommandResult:
    return CommandResult.info("Goodbye! Thanks for visiting.")


COMMANDS: dict[str, Handler] = {
    "help": cmd_help,
    "clear": cmd_clear,
    "about": cmd_about,
    "projects": cmd_projects,
    "contact": cmd_contact,
    "ls": cmd_ls,
    "cd": cmd_cd,
    "pwd": cmd_pwd,
    "cat": cmd_cat,
    "echo": cmd_echo,
    "neofetch": cmd_neofetch,
    "exit": cmd_exit,
}


# =============================================================================
# Dispatch
# =============================================================================

def _not_found_message(command: str) -> str:
    lines = [f"Command not found: {command}"]
    matches = fuzzy_suggestions(command, list(COMMANDS))
    if matches:
        lines.append(f"Did you mean: {matches[0].command}?")
        if len(matches) > 1:
            lines.append(f"Other possibilities: {', '.join(m.command for m in matches[1:])}")
    lines.append("Type 'help' for a list of available commands.")
    return "\n".join(lines)


async def execute(ctx: CommandContext, command: str, args: list[str]) -> CommandResult:
    """
    Run one command.

    Unknown verbs and handler failures come back as error envelopes; this
    never raises.
    """
    if not command:
        return CommandResult.error("Command not found: Empty command")

    handler = COMMANDS.get(command.lower())
    if handler is None:
        logger.debug(f"Unknown command: {command}")
        return CommandResult.error(_not_found_message(command))

    try:
        return await handler(ctx, list(args))
    except Exception as e:
        logger.exception(f"Command '{command}' failed")
        return CommandResult.error(f"Error executing command: {e}")
