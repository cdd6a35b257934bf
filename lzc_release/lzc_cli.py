"""
Script: lzc_release/lzc_cli.py
What: Thin wrappers around the `lzc-cli` packaging and app store tool.
Doing: Builds command lines for build, login check, image copy, and publish, and parses copy output.
Why: Keeps the external tool's command shapes and output format in one place.
Goal: Let command modules call `lzc-cli` without repeating argument lists.
"""

from __future__ import annotations

from pathlib import Path

from lzc_release.common import ReleaseToolError, run_cmd, run_cmd_combined


COPY_RESULT_MARKER = "lazycat-registry:"
LAZYCAT_REGISTRY_PREFIX = "registry.lazycat.cloud/"


def is_lazycat_image(image: str) -> bool:
    """True when the reference already lives on the LazyCat registry."""
    return image.startswith(LAZYCAT_REGISTRY_PREFIX)


def parse_copied_image(output: str) -> str:
    """
    Return the registry reference printed by `appstore copy-image`, or empty string.

    Expected line shape: `lazycat-registry: registry.lazycat.cloud/<owner>/<name>:<tag>`.
    """
    for line in output.splitlines():
        if COPY_RESULT_MARKER in line:
            return line.split(COPY_RESULT_MARKER, 1)[1].strip()
    return ""


def project_build(lzc_cli: str, output_file: Path, *, cwd: Path) -> None:
    """Run `lzc-cli project build -o <file>` with output streamed to the terminal."""
    try:
        run_cmd(
            [lzc_cli, "project", "build", "-o", str(output_file)],
            cwd=str(cwd),
            capture_output=False,
        )
    except ReleaseToolError as exc:
        raise ReleaseToolError(f"Build failed: {output_file.name}\n{exc}") from exc


def is_logged_in(lzc_cli: str, *, cwd: Path) -> bool:
    """Listing own images only succeeds with a valid app store session."""
    exit_code, _output = run_cmd_combined([lzc_cli, "appstore", "my-images"], cwd=str(cwd))
    return exit_code == 0


def copy_image(lzc_cli: str, image: str, *, cwd: Path) -> str:
    """Copy one image into the LazyCat registry and return its new reference."""
    exit_code, output = run_cmd_combined([lzc_cli, "appstore", "copy-image", image], cwd=str(cwd))
    new_image = parse_copied_image(output)
    if exit_code != 0 or not new_image:
        details = output.strip() or f"exit code {exit_code}"
        raise ReleaseToolError(f"Image copy failed: {image}\n{details}")
    return new_image


def publish_package(lzc_cli: str, package_file: Path, *, cwd: Path) -> None:
    """Submit a built `.lpk` to the app store review queue."""
    try:
        run_cmd(
            [lzc_cli, "appstore", "publish", str(package_file)],
            cwd=str(cwd),
            capture_output=False,
        )
    except ReleaseToolError as exc:
        raise ReleaseToolError(f"Publish failed: {package_file.name}\n{exc}") from exc
