"""
Script: lzc_release/app_copy_images.py
What: Copies the app's container images into the LazyCat registry.
Doing: Checks app store login, runs `lzc-cli appstore copy-image` per image, and rewrites manifest `image:` lines.
Why: Packages published to the store must pull from the LazyCat registry, not from public registries.
Goal: Leave the manifest pointing at registry copies, ready for a rebuild.
"""

from __future__ import annotations

from lzc_release import lzc_cli
from lzc_release.common import (
    ReleaseToolError,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from lzc_release.manifest import list_manifest_images, rewrite_image_references
from lzc_release.project import MANIFEST_FILE, ProjectSettings, load_project


def check_login(project: ProjectSettings) -> None:
    print_info("Checking app store login...")
    if lzc_cli.is_logged_in(project.lzc_cli, cwd=project.root):
        print_success("Logged in to the LazyCat app store")
        return
    print_warning("Not logged in to the LazyCat app store")
    print_info(f"Run first: {project.lzc_cli} appstore login")
    raise ReleaseToolError("App store login required")


def copy_images(project: ProjectSettings) -> dict[str, str]:
    """
    Copy every source image and return a mapping of old -> new references.

    Stops at the first failed copy; manifest lines for images copied before
    that point stay rewritten.
    """
    print_header("Copying images to the LazyCat registry")
    check_login(project)

    referenced = set(list_manifest_images(project.manifest_path))
    copied: dict[str, str] = {}
    for image in project.images:
        # Already-rewritten references come back on re-runs; copying them again is pointless.
        if lzc_cli.is_lazycat_image(image):
            print_info(f"Already on the LazyCat registry: {image}")
            continue

        # An `LZC_IMAGES` entry whose lines were already rewritten has nothing left to point at.
        if image not in referenced:
            print_info(f"Not referenced in {MANIFEST_FILE}, skipping: {image}")
            continue

        print_info(f"Copying image: {image}")
        new_image = lzc_cli.copy_image(project.lzc_cli, image, cwd=project.root)
        print_success(f"Copied: {new_image}")

        print_info(f"Updating image: {image} -> {new_image}")
        changed = rewrite_image_references(project.manifest_path, image, new_image)
        print_success(f"Updated {changed} line(s) in {MANIFEST_FILE}")
        copied[image] = new_image

    if copied:
        print_success(f"All images copied and written to {MANIFEST_FILE}")
        print_warning("Rebuild the app so the package uses the new images")
    else:
        print_info("No images needed copying")
    return copied


def main() -> None:
    copy_images(load_project())


if __name__ == "__main__":
    main()
