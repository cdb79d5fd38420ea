"""
Domain Ports

Port interfaces defining contracts between layers.
"""

from .launcher_port import ILauncherPort
from .process_runner_port import IAsyncProcessRunnerPort, IProcessRunnerPort

__all__ = [
    # Launcher
    "ILauncherPort",
    # Process runners
    "IProcessRunnerPort",
    "IAsyncProcessRunnerPort",
]
