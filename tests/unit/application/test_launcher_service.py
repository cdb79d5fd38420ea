"""
Unit tests for the Launcher application service.

The process runners are replaced with mocks so these tests only cover
orchestration: argument building, result classification and error
conversion.
"""

import os
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from macpack_launcher.application.services.launcher_service import Launcher
from macpack_launcher.domain.ports import IAsyncProcessRunnerPort, IProcessRunnerPort
from macpack_launcher.domain.value_objects import (
    Failure,
    FailureKind,
    Output,
    ProcessOutcome,
    ToolLocation,
)
from macpack_launcher.errors import ProcessSpawnError

TOOL = "/opt/macpack/bin/macpack"


@pytest.fixture
def process_runner():
    runner = Mock(spec=IProcessRunnerPort)
    runner.run.return_value = ProcessOutcome(output=b"OK", exit_code=0)
    return runner


@pytest.fixture
def async_process_runner():
    runner = AsyncMock(spec=IAsyncProcessRunnerPort)
    runner.run.return_value = ProcessOutcome(output=b"OK", exit_code=0)
    return runner


@pytest.fixture
def launcher(process_runner, async_process_runner):
    return Launcher(
        process_runner=process_runner,
        async_process_runner=async_process_runner,
        tool_location=TOOL,
    )


class TestLauncherRun:
    """Tests for Launcher.run()."""

    def test_returns_output(self, launcher):
        assert launcher.run("/tmp/Demo.mpb") == Output(text="OK", exit_code=0)

    def test_invokes_tool_with_normalized_path(self, launcher, process_runner):
        launcher.run("/tmp/bundles/../Demo.mpb/")

        process_runner.run.assert_called_once_with([TOOL, "/tmp/Demo.mpb"])

    def test_relative_path_is_resolved_against_cwd(self, launcher, process_runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        launcher.run("Demo.mpb")

        argv = process_runner.run.call_args.args[0]
        assert argv == [TOOL, os.path.join(os.getcwd(), "Demo.mpb")]

    def test_non_zero_exit_is_still_output(self, launcher, process_runner):
        process_runner.run.return_value = ProcessOutcome(output=b"ERR", exit_code=1)

        result = launcher.run("/tmp/Demo.mpb")

        assert result == Output(text="ERR", exit_code=1)

    def test_spawn_error_becomes_failure(self, launcher, process_runner):
        process_runner.run.side_effect = ProcessSpawnError(
            TOOL, detail=f"[Errno 2] No such file or directory: '{TOOL}'"
        )

        result = launcher.run("/tmp/Demo.mpb")

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.SPAWN
        assert "No such file or directory" in result.description

    def test_invalid_output_becomes_decode_failure(self, launcher, process_runner):
        process_runner.run.return_value = ProcessOutcome(output=b"\xff\xfe", exit_code=0)

        result = launcher.run("/tmp/Demo.mpb")

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.DECODE
        assert "utf-8" in result.description

    def test_unresolvable_working_directory_becomes_configuration_failure(
        self, launcher, process_runner, monkeypatch
    ):
        def _cwd_gone():
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr(os, "getcwd", _cwd_gone)

        result = launcher.run("Demo.mpb")

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.CONFIGURATION
        assert "Demo.mpb" in result.description
        assert "No such file or directory" in result.description
        process_runner.run.assert_not_called()

    def test_unresolvable_home_becomes_configuration_failure(self, process_runner, monkeypatch):
        def _no_home():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", _no_home)
        launcher = Launcher(process_runner=process_runner)

        result = launcher.run("/tmp/Demo.mpb")

        assert isinstance(result, Failure)
        assert result.kind == FailureKind.CONFIGURATION
        assert "home directory" in result.description
        process_runner.run.assert_not_called()

    def test_tool_location_resolved_from_home_each_call(self, process_runner, tmp_path, monkeypatch):
        launcher = Launcher(process_runner=process_runner)

        monkeypatch.setenv("HOME", str(tmp_path / "a"))
        launcher.run("/tmp/Demo.mpb")
        monkeypatch.setenv("HOME", str(tmp_path / "b"))
        launcher.run("/tmp/Demo.mpb")

        first, second = [c.args[0][0] for c in process_runner.run.call_args_list]
        assert first == str(tmp_path / "a" / ".macpack" / "bin" / "macpack")
        assert second == str(tmp_path / "b" / ".macpack" / "bin" / "macpack")

    def test_accepts_tool_location_value_object(self, process_runner):
        launcher = Launcher(
            process_runner=process_runner,
            tool_location=ToolLocation(path=Path(TOOL)),
        )

        launcher.run("/tmp/Demo.mpb")

        process_runner.run.assert_called_once_with([TOOL, "/tmp/Demo.mpb"])


class TestLauncherRunAsync:
    """Tests for Launcher.run_async()."""

    @pytest.mark.asyncio
    async def test_returns_output(self, launcher, async_process_runner, process_runner):
        result = await launcher.run_async("/tmp/x/../Demo.mpb")

        assert result == Output(text="OK", exit_code=0)
        async_process_runner.run.assert_awaited_once_with([TOOL, "/tmp/Demo.mpb"])
        process_runner.run.assert_not_called()

    @pytest.mark.asyncio
    async def test_spawn_error_becomes_failure(self, launcher, async_process_runner):
        async_process_runner.run.side_effect = ProcessSpawnError(TOOL, detail="[Errno 13] Permission denied")

        result = await launcher.run_async("/tmp/Demo.mpb")

        assert result.kind == FailureKind.SPAWN
        assert "Permission denied" in result.description

    @pytest.mark.asyncio
    async def test_invalid_output_becomes_decode_failure(self, launcher, async_process_runner):
        async_process_runner.run.return_value = ProcessOutcome(output=b"\xc3", exit_code=2)

        result = await launcher.run_async("/tmp/Demo.mpb")

        assert result.kind == FailureKind.DECODE
