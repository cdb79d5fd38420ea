"""
Launcher Port Interface

Defines the contract callers use to run a bundle.
This is an input port - called by the interfaces layer.
"""

from abc import ABC, abstractmethod

from macpack_launcher.domain.value_objects import ExecutionResult


class ILauncherPort(ABC):
    """
    Port interface for running a bundle through the macpack tool.

    Failures are returned as values, never raised.
    """

    @abstractmethod
    def run(self, bundle_path: str) -> ExecutionResult:
        """
        Run a bundle and block until the tool exits.

        Args:
            bundle_path: Relative or absolute bundle path, possibly empty

        Returns:
            Output with the merged text, or Failure with a description
        """
        pass

    @abstractmethod
    async def run_async(self, bundle_path: str) -> ExecutionResult:
        """Same as run(), without blocking the event loop."""
        pass
