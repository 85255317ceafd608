"""Tests for greasy.dispatch.runner."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from greasy.dispatch.runner import build_argv, build_env, exit_code_for, run_command
from greasy.errors import ToolNotExecutable, ToolNotFound
from greasy.models.core import Marker, Project


@pytest.fixture
def npm_project(tmp_path):
    return Project(marker=Marker("package.json", ("npm", "run")), root=tmp_path)


class TestBuildArgv:
    def test_no_args(self, npm_project):
        assert build_argv(npm_project, []) == ["npm", "run"]

    def test_args_forwarded_in_order(self, npm_project):
        args = ["test", "--", "--watch", "-t", "name with spaces", "$HOME", "*.js"]
        assert build_argv(npm_project, args) == ["npm", "run", *args]

    def test_tuple_args(self, npm_project):
        assert build_argv(npm_project, ("build",)) == ["npm", "run", "build"]


class TestBuildEnv:
    def test_appends_existing_dir(self, tmp_path):
        env = build_env([str(tmp_path)], base={"PATH": "/usr/bin"})
        assert env["PATH"] == os.pathsep.join(["/usr/bin", str(tmp_path)])

    def test_skips_missing_dir(self, tmp_path):
        env = build_env([str(tmp_path / "missing")], base={"PATH": "/usr/bin"})
        assert env["PATH"] == "/usr/bin"

    def test_no_duplicates(self, tmp_path):
        env = build_env([str(tmp_path)], base={"PATH": str(tmp_path)})
        assert env["PATH"] == str(tmp_path)

    def test_expands_user(self, tmp_path, monkeypatch):
        (tmp_path / "depot_tools").mkdir()
        monkeypatch.setenv("HOME", str(tmp_path))
        env = build_env(["~/depot_tools"], base={"PATH": "/bin"})
        assert env["PATH"].endswith(str(tmp_path / "depot_tools"))

    def test_other_vars_kept(self):
        env = build_env([], base={"PATH": "/bin", "FOO": "bar"})
        assert env["FOO"] == "bar"

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("GREASY_TEST_VAR", "1")
        assert build_env([])["GREASY_TEST_VAR"] == "1"

    def test_base_not_mutated(self, tmp_path):
        base = {"PATH": "/bin"}
        build_env([str(tmp_path)], base=base)
        assert base == {"PATH": "/bin"}


class TestExitCodeFor:
    def test_success(self):
        assert exit_code_for(0) == 0

    def test_failure_passthrough(self):
        assert exit_code_for(3) == 3

    def test_signal(self):
        assert exit_code_for(-9) == 137


class TestRunCommand:
    def test_runs_in_project_dir(self, mock_subprocess, tmp_path):
        assert run_command(["npm", "run", "test"], tmp_path, {"PATH": "/bin"}) == 0
        mock_subprocess.assert_called_once_with(
            ["npm", "run", "test"], cwd=tmp_path, env={"PATH": "/bin"}
        )

    def test_propagates_failure(self, mock_subprocess, tmp_path):
        mock_subprocess.return_value = subprocess.CompletedProcess([], 2)
        assert run_command(["cargo", "test"], tmp_path) == 2

    def test_killed_by_signal(self, mock_subprocess, tmp_path):
        mock_subprocess.return_value = subprocess.CompletedProcess([], -15)
        assert run_command(["blaze", "build"], tmp_path) == 143

    def test_missing_tool(self, mock_subprocess, tmp_path):
        mock_subprocess.side_effect = FileNotFoundError("blaze")
        with pytest.raises(ToolNotFound) as exc:
            run_command(["blaze", "build"], tmp_path)
        assert exc.value.exit_code == 127
        assert "blaze" in str(exc.value)

    def test_not_executable(self, mock_subprocess, tmp_path):
        mock_subprocess.side_effect = PermissionError(13, "Permission denied")
        with pytest.raises(ToolNotExecutable) as exc:
            run_command(["bash", "./run.sh"], tmp_path)
        assert exc.value.exit_code == 126

    def test_real_process(self, tmp_path):
        out = tmp_path / "cwd.txt"
        code = run_command(
            [
                sys.executable,
                "-c",
                "import os, sys; open('cwd.txt', 'w').write(os.getcwd()); sys.exit(5)",
            ],
            tmp_path,
        )
        assert code == 5
        assert Path(out.read_text()).samefile(tmp_path)
