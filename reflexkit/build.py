"""Compilation of the backend binary of a project."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
import time
from pathlib import Path

from reflexkit.config import ConfigError, load_config

_BUILD_LOCK = threading.Lock()


class BuildError(Exception):
    """Raised when a project cannot be built."""


def backend_binary_name() -> str:
    """Return the file name of the compiled backend on this platform."""
    return "reflex.exe" if sys.platform == "win32" else "reflex"


def _format_duration(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.3f}ms"
    return f"{seconds:.3f}s"


def full_build(directory=None, track_time: bool = True) -> Path:
    """Build the backend of the project in *directory* and return the binary path.

    Builds never overlap; a second caller waits until the first is done.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    with _BUILD_LOCK:
        start = time.perf_counter()

        try:
            conf = load_config(base)
        except ConfigError as exc:
            raise BuildError(str(exc)) from exc

        output = os.path.normpath(
            os.path.join(conf.output_dir, "backend", backend_binary_name())
        )
        backend = os.path.normpath(conf.backend_dir)
        argv = ["go", "build", "-o", f"./{output}", f"./{backend}"]
        try:
            subprocess.run(argv, cwd=base, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise BuildError(f"failed to build backend: {exc}") from exc

        if track_time:
            elapsed = time.perf_counter() - start
            print(f"Build completed in {_format_duration(elapsed)}")

        return base / output