"""
Script: lzc_release/app_info.py
What: Prints a summary of the app being released.
Doing: Shows name, version, package id, images, and the package file this version builds to.
Why: A quick look before building avoids publishing the wrong version.
Goal: Make the effective settings visible.
"""

from __future__ import annotations

from lzc_release.common import print_header
from lzc_release.project import ProjectSettings, load_project


UNKNOWN = "(unknown)"


def info_lines(project: ProjectSettings) -> list[str]:
    package_file = project.package_file_name if project.app_version else UNKNOWN
    lines = [
        f"App name: {project.app_name}",
        f"Version: {project.app_version or UNKNOWN}",
        f"Package: {project.package_name or UNKNOWN}",
        "",
        "Images:",
    ]
    if project.images:
        lines.extend(f"  - {image}" for image in project.images)
    else:
        lines.append("  (none)")
    lines.extend(
        [
            "",
            f"Package file: {package_file}",
            f"Manifest: {project.manifest_path}",
            f"lzc-cli: {project.lzc_cli}",
        ]
    )
    return lines


def show_info(project: ProjectSettings) -> None:
    print_header("App info")
    for line in info_lines(project):
        print(line)
    print()


def main() -> None:
    show_info(load_project())


if __name__ == "__main__":
    main()
