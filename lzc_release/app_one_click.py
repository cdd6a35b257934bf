"""
Script: lzc_release/app_one_click.py
What: Runs the full release flow: build, copy images, rebuild, publish.
Doing: Calls each stage in order and stops at the first failure.
Why: The first build catches packaging errors before any image is copied; the rebuild picks up the rewritten manifest.
Goal: One command from source tree to store submission.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from lzc_release.app_build import build_app
from lzc_release.app_copy_images import copy_images
from lzc_release.app_publish import publish_app
from lzc_release.common import ReleaseToolError, print_info, print_success
from lzc_release.project import ProjectSettings, load_project


Stage = tuple[str, Callable[[ProjectSettings], object]]

STAGES: list[Stage] = [
    ("Initial build (original images)", build_app),
    ("Image copy (updates manifest)", copy_images),
    ("Rebuild (new images)", build_app),
    ("Publish for review", publish_app),
]


def run_stages(
    stages: list[Stage],
    *,
    root: Path,
    loader: Callable[[Path], ProjectSettings] = load_project,
) -> None:
    """
    Run each stage against freshly loaded settings.

    Settings are reloaded per stage because the copy stage rewrites the
    manifest that later stages read.
    """
    total = len(stages)
    for number, (label, stage) in enumerate(stages, start=1):
        if number > 1:
            print()
        print_info(f"Stage {number}/{total}: {label}")
        try:
            stage(loader(root))
        except ReleaseToolError as exc:
            raise ReleaseToolError(f"Stage {number}/{total} failed: {label}: {exc}") from exc


def one_click_publish(project: ProjectSettings) -> None:
    run_stages(STAGES, root=project.root)
    print()
    print_success("One-click release finished")
    print_info("The app was submitted for review; expect 1-3 days")


def main() -> None:
    one_click_publish(load_project())


if __name__ == "__main__":
    main()
