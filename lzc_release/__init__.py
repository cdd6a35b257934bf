"""
Script: lzc_release package
What: Holds the Python build and release helpers for a LazyCat app package.
Doing: Groups one module per CLI command plus shared `lzc-cli`, manifest, and project helpers.
Why: Keeps release logic readable and testable instead of living in one long shell script.
Goal: Provide a clear, maintainable home for build, image copy, and publish steps.
"""
