import os
import subprocess
import sys
from unittest import mock

import pytest

from reflexkit.build import BuildError, backend_binary_name, full_build


def _write_config(directory, backend="src/backend", output="out"):
    (directory / "reflex.yaml").write_text(
        "frontend: src/frontend\n"
        f"backend: {backend}\n"
        "public: src/public\n"
        f"output: {output}\n",
        encoding="utf-8",
    )


def test_binary_name_on_windows():
    with mock.patch.object(sys, "platform", "win32"):
        assert backend_binary_name() == "reflex.exe"


def test_binary_name_on_unix():
    with mock.patch.object(sys, "platform", "linux"):
        assert backend_binary_name() == "reflex"


def test_missing_config_raises(tmp_path):
    with pytest.raises(BuildError, match="failed to open config file"):
        full_build(tmp_path, track_time=False)


def test_go_build_invocation(tmp_path):
    _write_config(tmp_path)
    with mock.patch("reflexkit.build.subprocess.run") as run:
        result = full_build(tmp_path, track_time=False)
    expected_out = os.path.join("out", "backend", backend_binary_name())
    expected_src = os.path.join("src", "backend")
    run.assert_called_once()
    argv = run.call_args.args[0]
    assert argv == ["go", "build", "-o", f"./{expected_out}", f"./{expected_src}"]
    assert run.call_args.kwargs["cwd"] == tmp_path
    assert result == tmp_path / expected_out


def test_track_time_reports(tmp_path, capsys):
    _write_config(tmp_path)
    with mock.patch("reflexkit.build.subprocess.run"):
        full_build(tmp_path, track_time=True)
    assert "Build completed in" in capsys.readouterr().out


def test_no_report_without_tracking(tmp_path, capsys):
    _write_config(tmp_path)
    with mock.patch("reflexkit.build.subprocess.run"):
        full_build(tmp_path, track_time=False)
    assert "Build completed in" not in capsys.readouterr().out


def test_compiler_failure_raises(tmp_path):
    _write_config(tmp_path)
    failure = subprocess.CalledProcessError(1, ["go", "build"])
    with mock.patch("reflexkit.build.subprocess.run", side_effect=failure):
        with pytest.raises(BuildError):
            full_build(tmp_path, track_time=False)


def test_missing_compiler_raises(tmp_path):
    _write_config(tmp_path)
    with mock.patch(
        "reflexkit.build.subprocess.run", side_effect=FileNotFoundError("go")
    ):
        with pytest.raises(BuildError):
            full_build(tmp_path, track_time=False)