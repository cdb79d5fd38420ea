"""
MacPack Launcher

Runs .mpb bundles through the macpack runtime and captures their output.
"""

__version__ = "0.1.0"

from .application import Launcher
from .domain import (
    BundlePath,
    ExecutionResult,
    Failure,
    FailureKind,
    Launch,
    LaunchState,
    Output,
    ToolLocation,
)
from .errors import (
    BundleManifestError,
    MacpackLauncherError,
    ProcessSpawnError,
    ToolLocationError,
)

__all__ = [
    "Launcher",
    "BundlePath",
    "ExecutionResult",
    "Failure",
    "FailureKind",
    "Launch",
    "LaunchState",
    "Output",
    "ToolLocation",
    "BundleManifestError",
    "MacpackLauncherError",
    "ProcessSpawnError",
    "ToolLocationError",
]
