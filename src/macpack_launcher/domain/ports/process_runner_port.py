"""
Process Runner Port Interface

Defines the contract for spawning the external tool and collecting its
merged output. This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from macpack_launcher.domain.value_objects import ProcessOutcome


class IProcessRunnerPort(ABC):
    """
    Port interface for blocking process execution.

    Implementations must send stdout and stderr into one capture sink and
    must not return before the child has been reaped.
    """

    @abstractmethod
    def run(self, argv: Sequence[str]) -> ProcessOutcome:
        """
        Spawn argv[0] with the remaining arguments and wait for it.

        Args:
            argv: Executable path followed by its arguments

        Returns:
            ProcessOutcome with merged output bytes and exit code

        Raises:
            ProcessSpawnError: If the process cannot be created or waited on
        """
        pass


class IAsyncProcessRunnerPort(ABC):
    """Port interface for process execution on an asyncio event loop."""

    @abstractmethod
    async def run(self, argv: Sequence[str]) -> ProcessOutcome:
        """
        Spawn argv[0] with the remaining arguments and await its exit.

        Raises:
            ProcessSpawnError: If the process cannot be created or waited on
        """
        pass
