from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping
from pathlib import Path

from lzc_release.common import ReleaseToolError, command_exists, optional_env, print_info
from lzc_release.menu import run_menu
from lzc_release.project import DEFAULT_LZC_CLI, MANIFEST_FILE


def command_map() -> dict[str, Callable[[], None]]:
    """
    Map CLI command names to Python entry functions.

    Each value is a `main()` function from one command module.
    """
    from lzc_release.app_build import main as app_build
    from lzc_release.app_copy_images import main as app_copy_images
    from lzc_release.app_info import main as app_info
    from lzc_release.app_one_click import main as app_one_click
    from lzc_release.app_publish import main as app_publish
    from lzc_release.app_validate import main as app_validate

    # Insertion order is the order shown in help and error messages.
    return {
        "build": app_build,
        "copy": app_copy_images,
        "publish": app_publish,
        "all": app_one_click,
        "info": app_info,
        "validate": app_validate,
    }


def build_parser(commands: Mapping[str, Callable[[], None]]) -> argparse.ArgumentParser:
    """Build argument parser with one optional positional command."""
    parser = argparse.ArgumentParser(
        prog="lzc-release",
        description="Build, copy images for, and publish a LazyCat app package. "
        "Without a command, an interactive menu is shown.",
    )
    # No `choices=`: unknown names must exit 1 with our own message, not argparse's 2.
    parser.add_argument("command", nargs="?", help=f"one of: {', '.join(commands)}")
    return parser


def run_command(command: str, commands: Mapping[str, Callable[[], None]]) -> None:
    """
    Run one registered command.

    `commands` is passed in to keep this function easy to test.
    """
    if command not in commands:
        raise ReleaseToolError(
            f"Unknown command: {command}\nAvailable commands: {', '.join(commands)}"
        )
    commands[command]()


def preflight(project_dir: Path, lzc_cli: str) -> None:
    """Stop early when not in an app root or when `lzc-cli` is not installed."""
    if not (project_dir / MANIFEST_FILE).is_file():
        raise ReleaseToolError(f"Run this tool from the app root ({MANIFEST_FILE} not found)")
    if not command_exists(lzc_cli):
        print_info("Install the LazyCat CLI tool first")
        raise ReleaseToolError(f"Command not found: {lzc_cli}")


def main(argv: list[str] | None = None) -> None:
    # Build command registry once so parser and dispatcher use the same keys.
    commands = command_map()
    parser = build_parser(commands)
    args = parser.parse_args(argv)

    try:
        preflight(
            Path(optional_env("LZC_PROJECT_DIR", ".")),
            optional_env("LZC_CLI", DEFAULT_LZC_CLI) or DEFAULT_LZC_CLI,
        )
        if args.command is None:
            run_menu(commands)
        else:
            run_command(args.command, commands)
    except ReleaseToolError as exc:
        # Keep failures short and readable in terminal output.
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
