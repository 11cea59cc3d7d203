"""
webterm - Terminal-Style Portfolio Shell

An interactive terminal over an in-memory virtual file system. The file
system is seeded with an about page and one file per project, and can be
replaced by a mirror of a real directory tree whose file contents are
loaded on first read.

Example:
    >>> from webterm import TerminalSession
    >>> session = TerminalSession.create()
    >>> result = await session.execute_command("ls")
    >>> print(result.output)

Main Classes:
    TerminalSession: History, directory, suggestions and the details panel
    VirtualFileSystem: Navigable in-memory tree
    TerminalConfig: Configuration management
"""

__version__ = "1.0.0"

# Public API - lazy imports keep `import webterm` free of the CLI stack
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "TerminalSession":
        from webterm.session.terminal import TerminalSession
        return TerminalSession

    if name == "VirtualFileSystem":
        from webterm.filesystem.vfs import VirtualFileSystem
        return VirtualFileSystem

    if name == "TerminalConfig":
        from webterm.config.settings import TerminalConfig
        return TerminalConfig

    if name in ("sync_tree", "convert_external_tree"):
        from webterm.filesystem import tree_sync
        return getattr(tree_sync, name)

    # Types
    if name in ("Node", "NodeKind", "Project", "CommandResult", "CommandKind", "HistoryEntry"):
        from webterm import types
        return getattr(types, name)

    raise AttributeError(f"module 'webterm' has no attribute {name!r}")


__all__ = [
    # Main classes
    "TerminalSession",
    "VirtualFileSystem",
    "TerminalConfig",

    # Tree synchronization
    "sync_tree",
    "convert_external_tree",

    # Types
    "Node",
    "NodeKind",
    "Project",
    "CommandResult",
    "CommandKind",
    "HistoryEntry",

    # Version
    "__version__",
]
