"""
Command-Line Interface

CLI commands for driving a webterm session from a real terminal.

Commands:
    webterm shell     - Interactive terminal session
    webterm run       - Run commands non-interactively
    webterm tree      - Display the mirrored directory tree
    webterm snapshot  - Write a JSON snapshot of a local directory

Usage:
    # Interactive session over the built-in tree
    webterm shell

    # Mirror a local checkout and browse it
    webterm shell --root ./my_repo

    # Batch mode
    webterm run "cd projects" ls "cat d4ut"

    # Snapshot a directory for later sessions
    webterm snapshot ./my_repo --output tree.json
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from webterm.config import TerminalConfig
from webterm.data.projects import ABOUT_TEXT
from webterm.filesystem.sources import (
    JsonTreeSource,
    LocalDirectoryTreeSource,
    TreeSource,
    build_tree_snapshot,
)
from webterm.session.storage import JsonStateStore, load_snapshot, save_snapshot
from webterm.session.terminal import TerminalSession
from webterm.types.nodes import Node
from webterm.types.results import CommandKind, HistoryEntry, ProjectListPayload

__all__ = ["main", "app"]

app = typer.Typer(
    name="webterm",
    help="Terminal-style portfolio shell over a virtual file system",
    no_args_is_help=True,
)
console = Console()

_STYLES = {
    CommandKind.ERROR: "red",
    CommandKind.INFO: "yellow",
}


# =============================================================================
# Setup
# =============================================================================

def _load_config(
    config_file: Optional[Path],
    snapshot: Optional[Path] = None,
    root: Optional[Path] = None,
) -> TerminalConfig:
    load_dotenv()
    config = TerminalConfig.from_file(config_file) if config_file else TerminalConfig()
    overrides = {}
    if snapshot is not None:
        overrides["tree_snapshot"] = str(snapshot)
    if root is not None:
        overrides["tree_root"] = str(root)
    if overrides:
        config = config.with_overrides(**overrides)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return config


def tree_source_from_config(config: TerminalConfig) -> TreeSource | None:
    """Pick the tree source named by the config (a snapshot wins over a directory)."""
    if config.tree_snapshot:
        return JsonTreeSource(config.tree_snapshot)
    if config.tree_root:
        return LocalDirectoryTreeSource(
            config.tree_root,
            include_dirs=config.include_dirs,
            include_files=config.include_files,
            exclude_names=config.exclude_names,
        )
    return None


async def open_session(config: TerminalConfig) -> TerminalSession:
    """Create a session, mirror the configured tree and restore saved state."""
    session = TerminalSession.create(config=config)

    source = tree_source_from_config(config)
    if source is not None:
        await session.sync_tree(source)

    if config.state_file:
        session.restore(load_snapshot(JsonStateStore(config.state_file)))
    return session


# =============================================================================
# Rendering
# =============================================================================

def _prompt(config: TerminalConfig, directory: str) -> str:
    return f"[green]{config.user}@{config.hostname}[/]:[blue]{directory}[/]$ "


def render_entry(entry: HistoryEntry) -> None:
    """Print one command's output the way the terminal view shows it."""
    if entry.kind == CommandKind.WELCOME:
        console.print(Panel(ABOUT_TEXT, title="Welcome", border_style="green"))
        return

    if isinstance(entry.output, ProjectListPayload):
        table = Table(title="Projects")
        table.add_column("Name", style="cyan")
        table.add_column("Description")
        for project in entry.output.projects:
            table.add_row(project.name, project.description)
        console.print(table)
        return

    if entry.output:
        console.print(entry.output, style=_STYLES.get(entry.kind), markup=False, highlight=False)


def render_details(session: TerminalSession) -> None:
    project = session.selected_project
    if project is not None:
        body = f"{project.description}\n\n{project.overview}"
        if project.tech_stack:
            body += "\n\nTech stack: " + ", ".join(item.name for item in project.tech_stack)
        console.print(Panel(body, title=project.name, border_style="cyan"))
    elif (details := session.selected_file) is not None:
        console.print(Panel(details.content, title=details.file_name, border_style="cyan"))
    session.close_details_panel()


def _build_rich_tree(node: Node, branch: Tree) -> None:
    for child in node.children.values():
        if child.is_directory:
            _build_rich_tree(child, branch.add(f"[bold blue]{child.name}/[/]"))
        else:
            branch.add(f"{child.name} [dim]({child.size})[/]")


# =============================================================================
# Commands
# =============================================================================

@app.command()
def shell(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
    ),
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot", "-s",
        help="JSON tree snapshot to mirror",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root", "-r",
        help="Local directory to mirror",
    ),
) -> None:
    """Start an interactive terminal session."""
    config = _load_config(config_file, snapshot, root)

    async def _run() -> None:
        session = await open_session(config)
        store = JsonStateStore(config.state_file) if config.state_file else None

        if not session.history:
            session.push_welcome()
            render_entry(session.history[-1])

        while True:
            try:
                line = console.input(_prompt(config, session.current_directory))
            except (EOFError, KeyboardInterrupt):
                console.print()
                break

            if not line.strip():
                continue

            result = await session.execute_command(line)
            if result.kind == CommandKind.CLEAR:
                console.clear()
            else:
                render_entry(session.history[-1])
                render_details(session)

            if store is not None:
                save_snapshot(store, session.snapshot())

            if line.split()[0].lower() == "exit":
                break

    asyncio.run(_run())


@app.command()
def run(
    commands: list[str] = typer.Argument(
        ...,
        help="Command lines to execute, in order",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
    ),
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot", "-s",
        help="JSON tree snapshot to mirror",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root", "-r",
        help="Local directory to mirror",
    ),
) -> None:
    """Run commands non-interactively and print their output."""
    config = _load_config(config_file, snapshot, root)

    async def _run() -> int:
        session = await open_session(config)
        failures = 0
        for line in commands:
            console.print(_prompt(config, session.current_directory), end="")
            console.print(line, markup=False, highlight=False)
            result = await session.execute_command(line)
            if result.kind == CommandKind.ERROR:
                failures += 1
            render_entry(session.history[-1])
            session.close_details_panel()
        return failures

    if asyncio.run(_run()):
        raise typer.Exit(code=1)


@app.command()
def tree(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
    ),
    snapshot: Optional[Path] = typer.Option(
        None,
        "--snapshot", "-s",
        help="JSON tree snapshot to mirror",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root", "-r",
        help="Local directory to mirror",
    ),
) -> None:
    """Display the directory tree a session would see."""
    config = _load_config(config_file, snapshot, root)

    async def _run() -> None:
        session = await open_session(config)
        rich_tree = Tree("[bold]/[/]")
        _build_rich_tree(session.vfs.root, rich_tree)
        console.print(rich_tree)

    asyncio.run(_run())


@app.command("snapshot")
def snapshot_cmd(
    root: Path = typer.Argument(
        ...,
        help="Directory to snapshot",
        exists=True,
        file_okay=False,
    ),
    output: Path = typer.Option(
        Path("./tree.json"),
        "--output", "-o",
        help="Where to write the snapshot",
    ),
    content: bool = typer.Option(
        True,
        "--content/--no-content",
        help="Embed file contents in the snapshot",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
    ),
) -> None:
    """Write a JSON snapshot of a local directory."""
    config = _load_config(config_file)
    source = LocalDirectoryTreeSource(
        root,
        include_dirs=config.include_dirs,
        include_files=config.include_files,
        exclude_names=config.exclude_names,
    )

    count = asyncio.run(build_tree_snapshot(source, output, include_content=content))
    console.print(f"[green]Wrote {count} files to {output}[/]")


def main() -> None:
    """Entry point for the CLI."""
    app()
