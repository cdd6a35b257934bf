"""
Script: lzc_release/manifest.py
What: Reads and rewrites `image:` references in `lzc-manifest.yml`.
Doing: Matches `image:` lines with a regex and swaps exact image references in place.
Why: The manifest must point at registry copies before the final build, without a YAML round-trip reformatting the file.
Goal: Make the manifest rewrite exact and safe to repeat.
"""

from __future__ import annotations

import re
from pathlib import Path


# Matches `image: ref`, `- image: ref`, quoted refs, and trailing comments.
IMAGE_LINE_RE = re.compile(
    r"^(?P<lead>\s*(?:-\s+)?image:\s*)"
    r"(?P<quote>[\"']?)(?P<ref>[^\s\"'#]+)(?P=quote)"
    r"(?P<trail>\s*(?:#.*)?)$"
)


def list_manifest_images(manifest_path: Path) -> list[str]:
    """Return unique image references in the order they appear."""
    images: list[str] = []
    for line in manifest_path.read_text(encoding="utf-8").splitlines():
        match = IMAGE_LINE_RE.match(line)
        if match and match.group("ref") not in images:
            images.append(match.group("ref"))
    return images


def rewrite_image_line(line: str, old_image: str, new_image: str) -> str:
    """Return `line` with its image swapped when it references exactly `old_image`."""
    match = IMAGE_LINE_RE.match(line)
    if not match or match.group("ref") != old_image:
        return line
    quote = match.group("quote")
    return f"{match.group('lead')}{quote}{new_image}{quote}{match.group('trail')}"


def rewrite_image_references(manifest_path: Path, old_image: str, new_image: str) -> int:
    """
    Point every `image: <old_image>` line at `new_image`.

    Only exact references change, so `postgres:17` never touches
    `postgres:17-alpine`. Returns the number of rewritten lines; the file is
    left untouched when that number is zero, which makes repeat runs no-ops.
    """
    text = manifest_path.read_text(encoding="utf-8")
    lines = text.splitlines(keepends=True)
    changed = 0
    for index, line in enumerate(lines):
        body = line.rstrip("\r\n")
        ending = line[len(body):]
        updated = rewrite_image_line(body, old_image, new_image)
        if updated != body:
            lines[index] = updated + ending
            changed += 1
    if changed:
        manifest_path.write_text("".join(lines), encoding="utf-8")
    return changed
