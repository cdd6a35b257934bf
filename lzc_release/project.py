"""
Script: lzc_release/project.py
What: Loads the project settings every command works from.
Doing: Reads app name, version, package name, and image list from `lzc-manifest.yml`, with env overrides.
Why: Commands should agree on one view of the project instead of each re-parsing files.
Goal: Give build, copy, publish, and info the same names and paths.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from lzc_release.common import ReleaseToolError, optional_env
from lzc_release.manifest import list_manifest_images


MANIFEST_FILE = "lzc-manifest.yml"
BUILD_FILE = "lzc-build.yml"
ICON_FILE = "icon.png"
REQUIRED_FILES = (MANIFEST_FILE, BUILD_FILE, ICON_FILE)

DEFAULT_LZC_CLI = "lzc-cli"
PACKAGE_SUFFIX = ".lpk"

IMAGE_LIST_SPLIT_RE = re.compile(r"[,\s]+")


@dataclass(frozen=True)
class ProjectSettings:
    root: Path
    app_name: str
    app_version: str
    package_name: str
    images: tuple[str, ...] = field(default_factory=tuple)
    lzc_cli: str = DEFAULT_LZC_CLI

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILE

    @property
    def build_path(self) -> Path:
        return self.root / BUILD_FILE

    @property
    def icon_path(self) -> Path:
        return self.root / ICON_FILE

    @property
    def package_file_name(self) -> str:
        """Return `<AppName>-<Version>.lpk`, the artifact name build and publish share."""
        if not self.app_version:
            raise ReleaseToolError(f"No version: field found in {self.manifest_path}")
        return f"{self.app_name}-{self.app_version}{PACKAGE_SUFFIX}"

    @property
    def package_path(self) -> Path:
        return self.root / self.package_file_name


def read_manifest_field(manifest_path: Path, key: str) -> str:
    """
    Return the value of the first top-level `key:` line, or empty string.

    Works like `grep "^key:" | awk '{print $2}'`: only the first token after the
    key is kept, and surrounding quotes are dropped.
    """
    prefix = f"{key}:"
    for line in manifest_path.read_text(encoding="utf-8").splitlines():
        if not line.startswith(prefix):
            continue
        tokens = line[len(prefix):].split()
        if not tokens:
            return ""
        return tokens[0].strip("\"'")
    return ""


def parse_image_list(raw: str) -> tuple[str, ...]:
    """Split a comma or whitespace separated image list, dropping blanks."""
    return tuple(item for item in IMAGE_LIST_SPLIT_RE.split(raw.strip()) if item)


def load_project(root: Path | None = None) -> ProjectSettings:
    """
    Build `ProjectSettings` from the manifest in `root` plus env overrides.

    `root` defaults to `LZC_PROJECT_DIR`, or the current directory.
    """
    if root is None:
        root = Path(optional_env("LZC_PROJECT_DIR", "."))
    root = root.resolve()
    manifest_path = root / MANIFEST_FILE
    if not manifest_path.is_file():
        raise ReleaseToolError(f"Run this tool from the app root: {manifest_path} not found")

    manifest_name = read_manifest_field(manifest_path, "name")
    app_name = optional_env("LZC_APP_NAME") or manifest_name
    if not app_name:
        raise ReleaseToolError(f"No name: field in {manifest_path} and LZC_APP_NAME is not set")

    # Explicit list wins; otherwise every image the manifest references is a source.
    images_override = optional_env("LZC_IMAGES")
    if images_override.strip():
        images = parse_image_list(images_override)
    else:
        images = tuple(list_manifest_images(manifest_path))

    return ProjectSettings(
        root=root,
        app_name=app_name,
        app_version=read_manifest_field(manifest_path, "version"),
        package_name=read_manifest_field(manifest_path, "package"),
        images=images,
        lzc_cli=optional_env("LZC_CLI", DEFAULT_LZC_CLI) or DEFAULT_LZC_CLI,
    )
