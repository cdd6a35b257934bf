"""
Script: lzc_release/app_publish.py
What: Submits the built `.lpk` package to the LazyCat app store.
Doing: Checks login and package presence, then runs `lzc-cli appstore publish`.
Why: Publishing a stale or missing package should fail before anything is uploaded.
Goal: Put the current package version into the store review queue.
"""

from __future__ import annotations

from lzc_release import lzc_cli
from lzc_release.app_copy_images import check_login
from lzc_release.common import ReleaseToolError, print_header, print_info, print_success
from lzc_release.project import ProjectSettings, load_project


def publish_app(project: ProjectSettings) -> None:
    print_header("Publishing to the app store")
    check_login(project)

    package_path = project.package_path
    if not package_path.is_file():
        print_info("Build the app first")
        raise ReleaseToolError(f"Package not found: {package_path.name}")

    print_info(f"Publishing package: {package_path.name}")
    lzc_cli.publish_package(project.lzc_cli, package_path, cwd=project.root)

    print_success("Publish succeeded")
    print_info("Wait for review (usually 1-3 days)")


def main() -> None:
    publish_app(load_project())


if __name__ == "__main__":
    main()
