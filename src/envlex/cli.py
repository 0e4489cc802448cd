"""CLI entry point for the envlex command."""

from __future__ import annotations

import argparse
from pathlib import Path


def check(path: Path | None) -> int:
    """Parse a .env file and report the result without starting the TUI."""
    from rich.console import Console
    from rich.markup import escape

    from envlex.config import load_config
    from envlex.exceptions import EnvlexError
    from envlex.files import find_env_file, load_env_file

    console = Console()
    if path is None:
        search = load_config().search
        path = find_env_file(filename=search.filename, match_suffix=search.match_suffix)
        if path is None:
            console.print("[red]Error: No .env file found[/red]")
            return 1
    try:
        values = load_env_file(path)
    except (EnvlexError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    console.print(f"[green]OK[/green] {escape(str(path))}: {len(values)} variables")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Launch the envlex viewer, or validate a file with --check."""
    parser = argparse.ArgumentParser(prog="envlex", description="Inspect a .env file.")
    parser.add_argument(
        "path", nargs="?", type=Path,
        help="file to open (default: nearest .env in this or a parent directory)",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="parse the file and exit non-zero on errors",
    )
    args = parser.parse_args(argv)

    if args.check:
        raise SystemExit(check(args.path))

    from envlex.app import EnvViewerApp

    app = EnvViewerApp(args.path)
    app.run()
