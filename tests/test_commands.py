"""Tests for the command registry and dispatcher."""

from unittest.mock import AsyncMock

import pytest

from webterm.commands import COMMANDS, CommandContext, execute, parse_command
from webterm.commands.registry import CONTACT_TEXT, HELP_TEXT
from webterm.config import TerminalConfig
from webterm.data.projects import ABOUT_TEXT, PROJECTS
from webterm.filesystem.vfs import VirtualFileSystem
from webterm.types import CommandKind, Node, ProjectListPayload


@pytest.fixture
def ctx():
    return CommandContext(
        vfs=VirtualFileSystem(),
        projects=PROJECTS,
        config=TerminalConfig(user="guest", hostname="box", theme="Dark"),
    )


class TestParseCommand:
    """Test command line splitting."""

    def test_splits_on_whitespace(self):
        assert parse_command("  cat   about.txt ") == ("cat", ["about.txt"])

    def test_empty(self):
        assert parse_command("   ") == ("", [])


class TestDispatch:
    """Test the dispatch boundary."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("verb", ["xyzzy", "rm", "sudo"])
    async def test_unknown_verb(self, ctx, verb):
        """Unknown verbs produce an error naming the verb."""
        result = await execute(ctx, verb, [])
        assert result.kind == CommandKind.ERROR
        assert verb in result.output
        assert "help" in result.output

    @pytest.mark.asyncio
    async def test_near_miss_hint(self, ctx):
        """A mistyped verb gets a suggestion."""
        result = await execute(ctx, "hlep", [])
        assert "Command not found: hlep" in result.output
        assert "Did you mean: help?" in result.output

    @pytest.mark.asyncio
    async def test_empty_command(self, ctx):
        result = await execute(ctx, "", [])
        assert result.kind == CommandKind.ERROR
        assert result.output == "Command not found: Empty command"

    @pytest.mark.asyncio
    async def test_verbs_case_insensitive(self, ctx):
        result = await execute(ctx, "PWD", [])
        assert result.kind == CommandKind.SUCCESS
        assert result.output == "/"

    @pytest.mark.asyncio
    async def test_handler_failure_is_contained(self, ctx, monkeypatch):
        """Exceptions inside a handler come back as error envelopes."""
        monkeypatch.setitem(COMMANDS, "pwd", AsyncMock(side_effect=RuntimeError("boom")))
        result = await execute(ctx, "pwd", [])
        assert result.kind == CommandKind.ERROR
        assert result.output == "Error executing command: boom"

    def test_table_covers_every_command(self):
        assert set(COMMANDS) == {
            "help", "clear", "about", "projects", "contact", "ls",
            "cd", "pwd", "cat", "echo", "neofetch", "exit",
        }


class TestStaticCommands:
    """Test commands with fixed output."""

    @pytest.mark.asyncio
    async def test_help(self, ctx):
        result = await execute(ctx, "help", [])
        assert result.output == HELP_TEXT
        for verb in COMMANDS:
            assert verb in result.output

    @pytest.mark.asyncio
    async def test_clear(self, ctx):
        result = await execute(ctx, "clear", [])
        assert result.kind == CommandKind.CLEAR
        assert result.output == ""

    @pytest.mark.asyncio
    async def test_about(self, ctx):
        result = await execute(ctx, "about", [])
        assert result.output == ABOUT_TEXT

    @pytest.mark.asyncio
    async def test_contact(self, ctx):
        result = await execute(ctx, "contact", [])
        assert result.output == CONTACT_TEXT

    @pytest.mark.asyncio
    async def test_projects(self, ctx):
        """projects returns the catalog as a structured payload."""
        result = await execute(ctx, "projects", [])
        assert result.kind == CommandKind.PROJECT_LIST
        assert isinstance(result.output, ProjectListPayload)
        assert [p.name for p in result.output.projects] == [p.name for p in PROJECTS]

    @pytest.mark.asyncio
    async def test_echo(self, ctx):
        result = await execute(ctx, "echo", ["hello", "world"])
        assert result.output == "hello world"

    @pytest.mark.asyncio
    async def test_echo_without_args(self, ctx):
        result = await execute(ctx, "echo", [])
        assert result.kind == CommandKind.SUCCESS
        assert result.output == ""

    @pytest.mark.asyncio
    async def test_neofetch(self, ctx):
        """neofetch reports the configured identity."""
        result = await execute(ctx, "neofetch", [])
        assert result.output.startswith("guest@box")
        assert "Theme: Dark" in result.output

    @pytest.mark.asyncio
    async def test_exit(self, ctx):
        result = await execute(ctx, "exit", [])
        assert result.kind == CommandKind.INFO
        assert "Goodbye" in result.output


class TestFilesystemCommands:
    """Test ls, cd, pwd and cat."""

    @pytest.mark.asyncio
    async def test_ls_rows(self, ctx):
        """ls prints `<d|-> <size> <name>` rows, directories first."""
        result = await execute(ctx, "ls", [])
        assert result.kind == CommandKind.SUCCESS
        size = str(len(ABOUT_TEXT))
        lines = result.output.split("\n")
        assert lines[0] == f"d {'0'.ljust(len(size))} projects"
        assert lines[1] == f"- {size} about.txt"

    @pytest.mark.asyncio
    async def test_ls_empty_directory(self, ctx):
        ctx.vfs.set_root_from_external_tree(Node.directory("/"))
        result = await execute(ctx, "ls", [])
        assert result.kind == CommandKind.SUCCESS
        assert result.output == "Directory is empty"

    @pytest.mark.asyncio
    async def test_cd_and_pwd(self, ctx):
        assert (await execute(ctx, "cd", ["projects"])).kind == CommandKind.SUCCESS
        assert (await execute(ctx, "pwd", [])).output == "/projects"

    @pytest.mark.asyncio
    async def test_cd_up_at_root(self, ctx):
        result = await execute(ctx, "cd", [".."])
        assert result.kind == CommandKind.SUCCESS
        assert ctx.vfs.path_string == "/"

    @pytest.mark.asyncio
    async def test_cd_usage(self, ctx):
        result = await execute(ctx, "cd", [])
        assert result.kind == CommandKind.ERROR
        assert result.output == "Usage: cd <directory>"

    @pytest.mark.asyncio
    async def test_cd_missing(self, ctx):
        result = await execute(ctx, "cd", ["nowhere"])
        assert result.kind == CommandKind.ERROR
        assert result.output == "Directory not found: nowhere"

    @pytest.mark.asyncio
    async def test_cat_about(self, ctx):
        result = await execute(ctx, "cat", ["about.txt"])
        assert result.kind == CommandKind.SUCCESS
        assert ABOUT_TEXT in result.output

    @pytest.mark.asyncio
    async def test_cat_missing(self, ctx):
        result = await execute(ctx, "cat", ["nonexistent.txt"])
        assert result.kind == CommandKind.ERROR
        assert "not found" in result.output.lower()

    @pytest.mark.asyncio
    async def test_cat_usage(self, ctx):
        result = await execute(ctx, "cat", [])
        assert result.output == "Usage: cat <filename>"

    @pytest.mark.asyncio
    async def test_cat_project_from_root(self, ctx):
        """Project names resolve through the projects directory."""
        result = await execute(ctx, "cat", ["RaidAlert"])
        assert result.kind == CommandKind.SUCCESS
        assert result.output.startswith("RaidAlert\n")
