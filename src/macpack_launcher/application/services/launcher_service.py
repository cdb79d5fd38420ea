"""
Launcher Service

Runs a bundle through the macpack tool and reports the merged output.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import structlog

from macpack_launcher.domain.entities import Launch
from macpack_launcher.domain.ports import (
    IAsyncProcessRunnerPort,
    ILauncherPort,
    IProcessRunnerPort,
)
from macpack_launcher.domain.services import (
    OUTPUT_ENCODING,
    build_command,
    decode_output,
    resolve_tool_location,
)
from macpack_launcher.domain.value_objects import (
    BundlePath,
    ExecutionResult,
    Failure,
    FailureKind,
    Output,
    ProcessOutcome,
    ToolLocation,
)
from macpack_launcher.errors import ProcessSpawnError, ToolLocationError
from macpack_launcher.infrastructure.process import AsyncSubprocessRunner, SubprocessRunner


logger = structlog.get_logger(__name__)


class Launcher(ILauncherPort):
    """
    Runs .mpb bundles with <home>/.macpack/bin/macpack.

    Each call:
    1. Resolves the tool location (per call, unless one was injected)
    2. Normalizes the bundle path to an absolute path
    3. Spawns the tool with the bundle path as its only argument
    4. Waits for exit and decodes the merged stdout/stderr as UTF-8

    The exit code never decides between Output and Failure. Failure is
    only returned when no output could be obtained at all.
    """

    def __init__(
        self,
        process_runner: Optional[IProcessRunnerPort] = None,
        async_process_runner: Optional[IAsyncProcessRunnerPort] = None,
        tool_location: Optional[Union[ToolLocation, str, Path]] = None,
    ):
        """
        Initialize the launcher.

        Args:
            process_runner: Blocking process runner (defaults to SubprocessRunner)
            async_process_runner: Event-loop process runner (defaults to AsyncSubprocessRunner)
            tool_location: Fixed tool path to use instead of the home directory lookup
        """
        self._process_runner = process_runner or SubprocessRunner()
        self._async_process_runner = async_process_runner or AsyncSubprocessRunner()
        if tool_location is not None and not isinstance(tool_location, ToolLocation):
            tool_location = ToolLocation(path=Path(tool_location))
        self._tool_location = tool_location

    def run(self, bundle_path: str) -> ExecutionResult:
        launch, argv, failure = self._prepare(bundle_path)
        if failure is not None:
            return self._finish(launch, failure)

        try:
            outcome = self._process_runner.run(argv)
        except ProcessSpawnError as e:
            return self._finish(launch, self._spawn_failure(launch, e))

        return self._finish(launch, self._to_output(launch, outcome))

    async def run_async(self, bundle_path: str) -> ExecutionResult:
        launch, argv, failure = self._prepare(bundle_path)
        if failure is not None:
            return self._finish(launch, failure)

        try:
            outcome = await self._async_process_runner.run(argv)
        except ProcessSpawnError as e:
            return self._finish(launch, self._spawn_failure(launch, e))

        return self._finish(launch, self._to_output(launch, outcome))

    def _prepare(
        self, bundle_path: str
    ) -> Tuple[Launch, List[str], Optional[Failure]]:
        """Build the launch record and the tool command line."""
        launch = Launch(bundle_path=BundlePath(raw=bundle_path, normalized=bundle_path))

        try:
            launch.bundle_path = BundlePath.from_raw(bundle_path)
        except OSError as e:
            # abspath() needs the working directory, which may have been removed
            logger.error(
                "Bundle path could not be normalized",
                launch_id=launch.launch_id,
                bundle_path=bundle_path,
                error=str(e),
            )
            return launch, [], Failure(
                description=f"Could not resolve bundle path {bundle_path!r}: {e}",
                kind=FailureKind.CONFIGURATION,
            )

        try:
            tool = self._tool_location or resolve_tool_location()
        except ToolLocationError as e:
            logger.error(
                "Tool location unavailable",
                launch_id=launch.launch_id,
                error=e.message,
                detail=e.detail,
            )
            return launch, [], Failure(description=e.describe(), kind=FailureKind.CONFIGURATION)

        launch.tool_location = tool
        logger.info(
            "Launching bundle",
            launch_id=launch.launch_id,
            bundle_path=launch.bundle_path.normalized,
            tool_location=str(tool),
        )
        return launch, build_command(tool, launch.bundle_path), None

    def _spawn_failure(self, launch: Launch, error: ProcessSpawnError) -> Failure:
        logger.error(
            "Failed to run tool",
            launch_id=launch.launch_id,
            tool_location=error.executable,
            error=error.message,
            detail=error.detail,
        )
        return Failure(description=error.describe(), kind=FailureKind.SPAWN)

    def _to_output(self, launch: Launch, outcome: ProcessOutcome) -> ExecutionResult:
        try:
            text = decode_output(outcome.output)
        except UnicodeDecodeError as e:
            logger.error(
                "Tool output is not valid text",
                launch_id=launch.launch_id,
                exit_code=outcome.exit_code,
                error=str(e),
            )
            return Failure(
                description=f"Tool output is not valid {OUTPUT_ENCODING}: {e}",
                kind=FailureKind.DECODE,
            )
        return Output(text=text, exit_code=outcome.exit_code)

    def _finish(self, launch: Launch, result: ExecutionResult) -> ExecutionResult:
        launch.complete(result)
        logger.info(
            "Launch completed",
            launch_id=launch.launch_id,
            succeeded=launch.succeeded,
            exit_code=result.exit_code if isinstance(result, Output) else None,
            duration_ms=launch.duration_ms,
        )
        return result
