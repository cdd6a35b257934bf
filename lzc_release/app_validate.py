"""
Script: lzc_release/app_validate.py
What: Checks that the app's required files exist and the manifest has the expected fields.
Doing: Reports each required file, then looks for `min_os_version:` and `healthcheck:` in the manifest.
Why: Missing files only show up late inside `lzc-cli` otherwise, with a less readable error.
Goal: Fail early, before any build or upload starts.
"""

from __future__ import annotations

from pathlib import Path

from lzc_release.common import (
    ReleaseToolError,
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from lzc_release.project import MANIFEST_FILE, REQUIRED_FILES, ProjectSettings, load_project


def missing_required_files(root: Path) -> list[str]:
    return [name for name in REQUIRED_FILES if not (root / name).is_file()]


def check_files(root: Path) -> None:
    print_header("Checking required files")

    # Report every file before failing so one run shows the whole problem.
    missing = missing_required_files(root)
    for name in REQUIRED_FILES:
        if name in missing:
            print_error(f"Missing file: {name}")
        else:
            print_success(f"Found file: {name}")

    if missing:
        raise ReleaseToolError(
            f"Make sure all required files exist (missing: {', '.join(missing)})"
        )


def manifest_has_key(manifest_path: Path, key: str) -> bool:
    """Plain substring check, like `grep -q "key:"`; nested keys count too."""
    return f"{key}:" in manifest_path.read_text(encoding="utf-8")


def validate_config(project: ProjectSettings) -> None:
    print_header("Validating configuration")

    if manifest_has_key(project.manifest_path, "min_os_version"):
        print_success(f"{MANIFEST_FILE} sets min_os_version")
    else:
        print_warning(f"{MANIFEST_FILE} is missing min_os_version")

    if manifest_has_key(project.manifest_path, "healthcheck"):
        print_success(f"{MANIFEST_FILE} configures a healthcheck")
    else:
        print_info(f"{MANIFEST_FILE} has no healthcheck configured")


def validate_project(project: ProjectSettings) -> None:
    check_files(project.root)
    validate_config(project)


def main() -> None:
    validate_project(load_project())


if __name__ == "__main__":
    main()
