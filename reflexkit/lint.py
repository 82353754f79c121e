"""Formatting and linting of a project with the tools it has configured."""

from __future__ import annotations

import contextlib
import subprocess
from collections.abc import Iterable
from pathlib import Path

from reflexkit.pacman import PackageManagerError, detect_node_package_manager

BIOME_CONFIG_FILE_NAMES = ("biome.json", "biome.jsonc")
ESLINT_CONFIG_FILE_NAMES = (
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
    "eslint.config.ts",
    "eslint.config.mts",
    "eslint.config.cts",
)


class LintError(Exception):
    """Raised when a linter reports problems or cannot be run."""


def config_present(names: Iterable[str], candidates: Iterable[str]) -> bool:
    """Return whether any of *names* is one of the *candidates*."""
    wanted = set(candidates)
    return any(name in wanted for name in names)


def _base(directory) -> Path:
    return Path(directory) if directory is not None else Path.cwd()


def format_project(directory=None) -> None:
    """Format the project with Biome and ``go fmt``, ignoring their failures."""
    base = _base(directory)
    npm = detect_node_package_manager(base)

    with contextlib.suppress(PackageManagerError):
        npm.exec_silent("biome", "check", "--write", cwd=base)

    with contextlib.suppress(OSError, subprocess.SubprocessError):
        subprocess.run(
            ["go", "fmt", "./..."],
            cwd=base,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )


def run_lint(fix: bool = False, directory=None) -> None:
    """Run Biome and ESLint where they are configured, fixing issues if *fix*."""
    base = _base(directory)
    npm = detect_node_package_manager(base)

    try:
        names = [entry.name for entry in base.iterdir()]
    except OSError as exc:
        raise LintError(f"failed to read directory entries: {exc}") from exc

    if config_present(names, BIOME_CONFIG_FILE_NAMES):
        try:
            if fix:
                npm.exec("biome", "check", "--write", "--unsafe", cwd=base)
            else:
                npm.exec("biome", "check", cwd=base)
        except PackageManagerError as exc:
            raise LintError(f"failed to lint with biome: {exc}") from exc

    if config_present(names, ESLINT_CONFIG_FILE_NAMES):
        try:
            if fix:
                npm.exec("eslint", "--fix", cwd=base)
            else:
                npm.exec_silent("eslint", cwd=base)
        except PackageManagerError as exc:
            raise LintError(f"failed to lint with eslint: {exc}") from exc