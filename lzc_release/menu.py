"""
Script: lzc_release/menu.py
What: Interactive numbered menu shown when no command is given.
Doing: Prints options 1-7, reads a choice, and runs the matching command until the user exits.
Why: Some releases are done by hand, one step at a time.
Goal: Same commands as the CLI, reachable without remembering names.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from lzc_release.app_info import UNKNOWN
from lzc_release.common import ReleaseToolError, print_error, print_header, print_info
from lzc_release.project import ProjectSettings, load_project


EXIT_CHOICE = "7"

# (choice, label, command name)
MENU_ENTRIES: list[tuple[str, str, str]] = [
    ("1", "Build app (Build)", "build"),
    ("2", "Copy images to the LazyCat registry (Copy Images)", "copy"),
    ("3", "Publish to the app store (Publish)", "publish"),
    ("4", "Build + copy images + publish (One-Click)", "all"),
    ("5", "Show app info (Info)", "info"),
    ("6", "Validate config files (Validate)", "validate"),
]


def menu_lines() -> list[str]:
    lines = [f"{choice}. {label}" for choice, label, _command in MENU_ENTRIES]
    lines.append(f"{EXIT_CHOICE}. Exit (Exit)")
    return lines


def show_menu(project: ProjectSettings) -> None:
    print()
    print_header(f"{project.app_name} v{project.app_version or UNKNOWN} - build and release tool")
    print()
    for line in menu_lines():
        print(line)
    print()


def handle_choice(choice: str, commands: Mapping[str, Callable[[], None]]) -> bool:
    """
    Run the command for one menu choice.

    Returns False when the menu should close. A failing command raises
    `ReleaseToolError`, which ends the menu with exit code 1.
    """
    if choice == EXIT_CHOICE:
        print_info("Exit")
        return False

    command = {entry_choice: name for entry_choice, _label, name in MENU_ENTRIES}.get(choice)
    if command is None:
        print_error("Invalid choice")
        return True

    commands[command]()
    return True


def run_menu(
    commands: Mapping[str, Callable[[], None]],
    *,
    read_input: Callable[[str], str] = input,
    loader: Callable[[], ProjectSettings] = load_project,
) -> None:
    keep_running = True
    while keep_running:
        # Reload each round; the header version follows manifest edits.
        show_menu(loader())
        try:
            choice = read_input(f"Choose an action [1-{EXIT_CHOICE}]: ").strip()
        except EOFError as exc:
            print()
            raise ReleaseToolError("No menu choice read (end of input)") from exc
        keep_running = handle_choice(choice, commands)
