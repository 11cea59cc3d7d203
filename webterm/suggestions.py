"""
Command Suggestions

Pure ranking functions over the known command set.

    get_command_suggestions: as-you-type prefix completion
    fuzzy_suggestions: near-miss matching for mistyped commands
"""

from __future__ import annotations

from collections.abc import Sequence

import Levenshtein

from webterm.types.results import CommandSuggestion

KNOWN_COMMANDS: tuple[str, ...] = (
    "help",
    "clear",
    "about",
    "projects",
    "contact",
    "ls",
    "cd",
    "pwd",
    "cat",
    "echo",
    "neofetch",
    "exit",
)

PREFIX_SCORE = 1.0


def get_command_suggestions(
    prefix: str,
    commands: Sequence[str] = KNOWN_COMMANDS,
) -> list[CommandSuggestion]:
    """
    Complete a partial command.

    A blank prefix yields nothing. Otherwise every command starting with
    the lowercased prefix is returned, in table order, with a fixed score.
    """
    if not prefix.strip():
        return []
    needle = prefix.lower()
    return [
        CommandSuggestion(command=command, score=PREFIX_SCORE)
        for command in commands
        if command.startswith(needle)
    ]


def fuzzy_suggestions(
    text: str,
    commands: Sequence[str] = KNOWN_COMMANDS,
    *,
    limit: int = 3,
    threshold: float = 0.3,
) -> list[CommandSuggestion]:
    """
    Rank commands by similarity to `text`, best first.

    Scores: 1.0 exact, 0.9 prefix, 0.8 substring, otherwise one minus the
    edit distance over the longer length. Only scores above `threshold` are
    kept.
    """
    if not text.strip():
        return []
    scored = [
        CommandSuggestion(command=command, score=similarity(text, command))
        for command in commands
    ]
    ranked = sorted(
        (s for s in scored if s.score > threshold),
        key=lambda s: s.score,
        reverse=True,
    )
    return ranked[:limit]


def similarity(text: str, command: str) -> float:
    a = text.lower()
    b = command.lower()
    if a == b:
        return 1.0
    if b.startswith(a):
        return 0.9
    if a in b:
        return 0.8
    return 1 - Levenshtein.distance(a, b) / max(len(a), len(b))
