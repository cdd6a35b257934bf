from __future__ import annotations

import os
import sys
import unittest
from unittest import mock

from lzc_release.common import (
    ReleaseToolError,
    human_size,
    optional_env,
    require_env,
    run_cmd,
    run_cmd_combined,
)


class EnvTests(unittest.TestCase):
    def test_require_env_rejects_empty_value(self) -> None:
        with mock.patch.dict(os.environ, {"LZC_TEST_VALUE": ""}):
            with self.assertRaises(ReleaseToolError):
                require_env("LZC_TEST_VALUE")

    def test_optional_env_default(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(optional_env("LZC_TEST_VALUE", "fallback"), "fallback")


class RunCmdTests(unittest.TestCase):
    def test_run_cmd_returns_stdout(self) -> None:
        output = run_cmd([sys.executable, "-c", "print('hello')"])
        self.assertEqual(output.strip(), "hello")

    def test_run_cmd_failure_includes_stderr(self) -> None:
        with self.assertRaises(ReleaseToolError) as ctx:
            run_cmd([sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"])
        self.assertIn("boom", str(ctx.exception))

    def test_run_cmd_missing_executable(self) -> None:
        with self.assertRaises(ReleaseToolError):
            run_cmd(["lzc-release-no-such-binary"])

    def test_combined_merges_stderr_and_keeps_exit_code(self) -> None:
        exit_code, output = run_cmd_combined(
            [sys.executable, "-c", "import sys; print('out'); sys.stdout.flush(); sys.stderr.write('err'); sys.exit(2)"]
        )
        self.assertEqual(exit_code, 2)
        self.assertIn("out", output)
        self.assertIn("err", output)


class HumanSizeTests(unittest.TestCase):
    def test_formats_like_ls(self) -> None:
        self.assertEqual(human_size(512), "512B")
        self.assertEqual(human_size(2048), "2.0K")
        self.assertEqual(human_size(1075), "1.1K")
        self.assertEqual(human_size(10 * 1024 + 1), "11K")
        self.assertEqual(human_size(50 * 1024 * 1024), "50M")


if __name__ == "__main__":
    unittest.main()
