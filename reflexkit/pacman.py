"""Node package managers: detection and running their tools."""

from __future__ import annotations

import enum
import os
import subprocess
from pathlib import Path


class PackageManagerError(Exception):
    """Raised when a package manager cannot be found or a command fails."""


_LOCK_FILES = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("package-lock.json", "npm"),
)


def _run(argv: list[str], cwd, *, quiet_stdout: bool, quiet_stderr: bool) -> None:
    subprocess.run(
        argv,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL if quiet_stdout else None,
        stderr=subprocess.DEVNULL if quiet_stderr else None,
        check=True,
    )


class NodePackageManager(enum.Enum):
    """A Node package manager, valued by its command name."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value

    def install_dependencies(self, cwd=None) -> None:
        """Run ``<manager> install``."""
        try:
            _run([self.value, "install"], cwd, quiet_stdout=True, quiet_stderr=False)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PackageManagerError(
                f"failed to install dependencies via {self.value}: {exc}"
            ) from exc

    def run_script(self, script: str, cwd=None) -> None:
        """Run ``<manager> run <script>``."""
        try:
            _run(
                [self.value, "run", script], cwd, quiet_stdout=True, quiet_stderr=False
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PackageManagerError(
                f"failed to run script via {self.value}: {exc}"
            ) from exc

    @staticmethod
    def _binary_path(binary: str, cwd) -> str:
        base = Path(cwd) if cwd is not None else Path.cwd()
        return os.fspath(base / "node_modules" / ".bin" / binary)

    def exec(self, binary: str, *args: str, cwd=None) -> None:
        """Run a binary from ``node_modules/.bin`` with output shown."""
        argv = [self._binary_path(binary, cwd), *args]
        try:
            _run(argv, cwd, quiet_stdout=False, quiet_stderr=False)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PackageManagerError(
                f"failed to execute binary via node: {exc}"
            ) from exc

    def exec_silent(self, binary: str, *args: str, cwd=None) -> None:
        """Run a binary from ``node_modules/.bin`` with output discarded."""
        argv = [self._binary_path(binary, cwd), *args]
        try:
            _run(argv, cwd, quiet_stdout=True, quiet_stderr=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise PackageManagerError(
                f"failed to execute binary via node: {exc}"
            ) from exc


def detect_node_package_manager(directory=None) -> NodePackageManager:
    """Pick the package manager whose lock file is present in *directory*."""
    base = Path(directory) if directory is not None else Path.cwd()
    for lock_file, name in _LOCK_FILES:
        if (base / lock_file).exists():
            return NodePackageManager(name)
    raise PackageManagerError("unknown package manager")