#!/usr/bin/env python3
"""
Build Tree Snapshot Script

Thin wrapper around build_tree_snapshot() for producing the JSON listing a
session mirrors at startup (see WEBTERM_TREE_SNAPSHOT).

Usage:
    python scripts/build_tree.py ./my_repo
    python scripts/build_tree.py ./my_repo --output ./tree.json
    python scripts/build_tree.py ./my_repo --include-dir src --include-file README.md
    python scripts/build_tree.py ./my_repo --no-content
"""

from __future__ import annotations

import argparse
import asyncio
import time
from pathlib import Path

from dotenv import load_dotenv

from webterm.config import TerminalConfig
from webterm.filesystem.sources import LocalDirectoryTreeSource, build_tree_snapshot

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Write a JSON tree snapshot of a local directory"
    )
    parser.add_argument("root", type=Path, help="Directory to snapshot")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("./tree.json"),
        help="Snapshot file to write (default: ./tree.json)",
    )
    parser.add_argument(
        "--include-dir",
        action="append",
        default=None,
        help="Top-level directory to include (repeatable; default: from TerminalConfig)",
    )
    parser.add_argument(
        "--include-file",
        action="append",
        default=None,
        help="Top-level file to include (repeatable; default: from TerminalConfig)",
    )
    parser.add_argument(
        "--content",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Embed file contents in the snapshot (default: true)",
    )
    return parser.parse_args()


async def main() -> None:
    args = parse_args()

    if not args.root.is_dir():
        raise FileNotFoundError(f"Directory not found: {args.root}")

    config = TerminalConfig()
    source = LocalDirectoryTreeSource(
        args.root,
        include_dirs=args.include_dir if args.include_dir is not None else config.include_dirs,
        include_files=args.include_file if args.include_file is not None else config.include_files,
        exclude_names=config.exclude_names,
    )

    start = time.time()
    print(f"Scanning {source.root}...")
    count = await build_tree_snapshot(source, args.output, include_content=args.content)

    print("\nSnapshot complete")
    print(f"  Files: {count}")
    print(f"  Output: {args.output}")
    print(f"  Duration: {time.time() - start:.2f}s")


if __name__ == "__main__":
    asyncio.run(main())
