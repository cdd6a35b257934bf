"""
Script: lzc_release/app_build.py
What: Builds the `.lpk` application package.
Doing: Checks required files, then runs `lzc-cli project build -o <AppName>-<Version>.lpk`.
Why: The package name must match what publish later looks for.
Goal: Produce one package file for the current manifest version.
"""

from __future__ import annotations

from pathlib import Path

from lzc_release import lzc_cli
from lzc_release.app_validate import check_files
from lzc_release.common import ReleaseToolError, human_size, print_header, print_info, print_success
from lzc_release.project import ProjectSettings, load_project


def build_app(project: ProjectSettings) -> Path:
    """Build the package and return its path."""
    print_header("Building app package")
    check_files(project.root)

    output_file = project.package_path
    # A package left by an earlier build must not pass as this build's output.
    output_file.unlink(missing_ok=True)

    print_info(f"Starting build: {output_file.name}")
    lzc_cli.project_build(project.lzc_cli, output_file, cwd=project.root)

    # `lzc-cli` exiting 0 without writing the file still counts as a failed build.
    if not output_file.is_file():
        raise ReleaseToolError(f"Build failed: {output_file.name} was not created")

    print_success(f"Build succeeded: {output_file.name}")
    print(f"{human_size(output_file.stat().st_size)}\t{output_file}")
    return output_file


def main() -> None:
    build_app(load_project())


if __name__ == "__main__":
    main()
