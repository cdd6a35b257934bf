"""
Script: tests/test_manifest.py
What: Tests image listing and rewriting in `lzc_release/manifest.py`.
Doing: Rewrites sample manifests and checks exact-match, formatting, and repeat-run behavior.
Why: A wrong rewrite publishes a package that pulls the wrong image.
Goal: Keep manifest edits exact and repeatable.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lzc_release.manifest import (
    list_manifest_images,
    rewrite_image_line,
    rewrite_image_references,
)


SAMPLE_MANIFEST = """\
name: Rote
package: cloud.lazycat.app.rote
version: 1.2.0
services:
  backend:
    image: rabithua/rote-backend:latest
  frontend:
    image: "rabithua/rote-frontend:latest"  # web ui
  db:
    image: postgres:17
  cache:
    image: postgres:17-alpine
  worker:
    - image: rabithua/rote-backend:latest
"""


class ManifestTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self._temp_dir.cleanup)
        self.manifest = Path(self._temp_dir.name) / "lzc-manifest.yml"
        self.manifest.write_text(SAMPLE_MANIFEST, encoding="utf-8")

    def test_lists_unique_images_in_order(self) -> None:
        self.assertEqual(
            list_manifest_images(self.manifest),
            [
                "rabithua/rote-backend:latest",
                "rabithua/rote-frontend:latest",
                "postgres:17",
                "postgres:17-alpine",
            ],
        )

    def test_rewrites_every_matching_line(self) -> None:
        changed = rewrite_image_references(
            self.manifest,
            "rabithua/rote-backend:latest",
            "registry.lazycat.cloud/u/rabithua/rote-backend:abc123",
        )
        self.assertEqual(changed, 2)
        text = self.manifest.read_text(encoding="utf-8")
        self.assertIn("    image: registry.lazycat.cloud/u/rabithua/rote-backend:abc123\n", text)
        self.assertIn("    - image: registry.lazycat.cloud/u/rabithua/rote-backend:abc123\n", text)
        self.assertNotIn("image: rabithua/rote-backend:latest", text)

    def test_does_not_touch_images_sharing_a_prefix(self) -> None:
        rewrite_image_references(self.manifest, "postgres:17", "registry.lazycat.cloud/u/postgres:17")
        text = self.manifest.read_text(encoding="utf-8")
        self.assertIn("image: registry.lazycat.cloud/u/postgres:17\n", text)
        self.assertIn("image: postgres:17-alpine\n", text)

    def test_keeps_quotes_and_trailing_comment(self) -> None:
        line = '    image: "rabithua/rote-frontend:latest"  # web ui'
        self.assertEqual(
            rewrite_image_line(line, "rabithua/rote-frontend:latest", "registry.lazycat.cloud/u/front:1"),
            '    image: "registry.lazycat.cloud/u/front:1"  # web ui',
        )

    def test_second_rewrite_is_a_no_op(self) -> None:
        new_image = "registry.lazycat.cloud/u/postgres:17"
        self.assertEqual(rewrite_image_references(self.manifest, "postgres:17", new_image), 1)
        after_first = self.manifest.read_text(encoding="utf-8")

        self.assertEqual(rewrite_image_references(self.manifest, "postgres:17", new_image), 0)
        self.assertEqual(self.manifest.read_text(encoding="utf-8"), after_first)

    def test_non_image_lines_are_unchanged(self) -> None:
        self.assertEqual(
            rewrite_image_line("# image: postgres:17", "postgres:17", "other:1"),
            "# image: postgres:17",
        )


if __name__ == "__main__":
    unittest.main()
