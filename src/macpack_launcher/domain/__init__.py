"""
Launcher Domain Layer

Launch entity, value objects and domain services for running bundles.
"""

from .entities import Launch
from .value_objects import (
    BundlePath,
    ExecutionResult,
    Failure,
    FailureKind,
    LaunchState,
    Output,
    ProcessOutcome,
    ToolLocation,
)

__all__ = [
    "Launch",
    "BundlePath",
    "ExecutionResult",
    "Failure",
    "FailureKind",
    "LaunchState",
    "Output",
    "ProcessOutcome",
    "ToolLocation",
]
