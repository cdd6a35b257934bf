"""
Script: lzc_release/common.py
What: Shared helper functions used by all `lzc_release` modules.
Doing: Wraps env reads, command execution, status printing, and size formatting.
Why: Avoids duplicated helper code.
Goal: Keep behavior consistent across all command modules.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from typing import Sequence


class ReleaseToolError(RuntimeError):
    """Raised when a build or release step hits a known error condition."""


HEADER_RULE = "=" * 40


def require_env(name: str) -> str:
    """Return a required environment variable or raise a clear error."""
    value = os.environ.get(name)
    if value is None or value == "":
        raise ReleaseToolError(f"Missing required environment variable: {name}")
    return value


def optional_env(name: str, default: str = "") -> str:
    """Return an environment variable with a fallback default."""
    return os.environ.get(name, default)


def run_cmd(
    args: Sequence[str],
    *,
    capture_output: bool = True,
    cwd: str | None = None,
) -> str:
    """Run a command and return stdout, raising a readable error on failure."""
    try:
        result = subprocess.run(
            list(args),
            check=True,
            text=True,
            capture_output=capture_output,
            cwd=cwd,
        )
    except FileNotFoundError as exc:
        raise ReleaseToolError(f"Command not found: {args[0]}") from exc
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        stdout = (exc.stdout or "").strip()
        details = stderr or stdout or str(exc)
        raise ReleaseToolError(f"Command failed: {' '.join(args)}\n{details}") from exc

    if not capture_output:
        return ""
    return result.stdout


def run_cmd_combined(args: Sequence[str], *, cwd: str | None = None) -> tuple[int, str]:
    """
    Run a command and return `(exit_code, output)` without raising on failure.

    stderr is merged into stdout, like `2>&1` in a shell, because some `lzc-cli`
    subcommands print their result marker on stderr.
    """
    try:
        result = subprocess.run(
            list(args),
            check=False,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            cwd=cwd,
        )
    except FileNotFoundError as exc:
        raise ReleaseToolError(f"Command not found: {args[0]}") from exc
    return result.returncode, result.stdout or ""


def command_exists(name: str) -> bool:
    """True when `name` resolves to an executable on PATH."""
    return shutil.which(name) is not None


def print_header(title: str) -> None:
    print(HEADER_RULE)
    print(title)
    print(HEADER_RULE)


def print_success(message: str) -> None:
    print(f"[ok] {message}")


def print_error(message: str) -> None:
    print(f"[error] {message}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"[warn] {message}")


def print_info(message: str) -> None:
    print(f"[info] {message}")


def human_size(num_bytes: int) -> str:
    """Format a byte count the way `ls -lh` does, rounding up (for example `12K`, `3.4M`)."""
    if num_bytes < 1024:
        return f"{num_bytes}B"
    for power, unit in enumerate(("K", "M", "G", "T"), start=1):
        divisor = 1024**power
        # Integer ceiling division keeps `ls` rounding exact.
        tenths = -(-num_bytes * 10 // divisor)
        if tenths < 100:
            return f"{tenths // 10}.{tenths % 10}{unit}"
        whole = -(-num_bytes // divisor)
        if whole < 1024 or unit == "T":
            return f"{whole}{unit}"
    return f"{num_bytes}B"
