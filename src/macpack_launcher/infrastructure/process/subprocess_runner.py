"""
Subprocess runners for the macpack tool.

Both runners merge stderr into stdout at the OS level, so the captured
bytes keep the order in which the child wrote them. There is no timeout;
the runners wait for the child unconditionally.
"""

import asyncio
import subprocess
import time
from typing import Sequence

import structlog

from macpack_launcher.domain.ports import IAsyncProcessRunnerPort, IProcessRunnerPort
from macpack_launcher.domain.value_objects import ProcessOutcome
from macpack_launcher.errors import ProcessSpawnError

logger = structlog.get_logger(__name__)


class SubprocessRunner(IProcessRunnerPort):
    """Blocking runner built on subprocess.Popen."""

    def run(self, argv: Sequence[str]) -> ProcessOutcome:
        argv = list(argv)
        start_time = time.perf_counter()
        logger.debug("Spawning process", argv=argv)

        try:
            process = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            raise ProcessSpawnError(argv[0], detail=str(e)) from e

        try:
            output, _ = process.communicate()
        except OSError as e:
            process.kill()
            process.wait()
            raise ProcessSpawnError(
                argv[0], message="Failed to collect tool output", detail=str(e)
            ) from e

        logger.debug(
            "Process exited",
            pid=process.pid,
            exit_code=process.returncode,
            output_bytes=len(output),
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        return ProcessOutcome(output=output, exit_code=process.returncode)


class AsyncSubprocessRunner(IAsyncProcessRunnerPort):
    """Event-loop runner built on asyncio.create_subprocess_exec."""

    async def run(self, argv: Sequence[str]) -> ProcessOutcome:
        argv = list(argv)
        start_time = time.perf_counter()
        logger.debug("Spawning process", argv=argv)

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            raise ProcessSpawnError(argv[0], detail=str(e)) from e

        try:
            output, _ = await process.communicate()
        except OSError as e:
            process.kill()
            await process.wait()
            raise ProcessSpawnError(
                argv[0], message="Failed to collect tool output", detail=str(e)
            ) from e

        logger.debug(
            "Process exited",
            pid=process.pid,
            exit_code=process.returncode,
            output_bytes=len(output),
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        return ProcessOutcome(output=output, exit_code=process.returncode)
