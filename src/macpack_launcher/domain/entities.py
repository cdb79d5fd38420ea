"""
Launch Entities

Core domain entity tracking one launcher invocation.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from macpack_launcher.domain.value_objects import (
    BundlePath,
    ExecutionResult,
    LaunchState,
    Output,
    ToolLocation,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_launch_id() -> str:
    return f"launch_{uuid.uuid4().hex[:12]}"


@dataclass
class Launch:
    """
    Represents a single run of a bundle through the macpack tool.

    A launch starts out running and is completed exactly once, with either
    an Output or a Failure. Nothing is carried over between launches.
    """

    bundle_path: BundlePath
    tool_location: Optional[ToolLocation] = None
    launch_id: str = field(default_factory=_new_launch_id)
    state: LaunchState = LaunchState.RUNNING
    result: Optional[ExecutionResult] = None
    started_at: datetime = field(default_factory=_utcnow)
    completed_at: Optional[datetime] = None

    def complete(self, result: ExecutionResult) -> None:
        """Mark the launch as completed with its result."""
        if self.state is LaunchState.COMPLETED:
            raise ValueError(f"Launch {self.launch_id} is already completed")
        self.state = LaunchState.COMPLETED
        self.result = result
        self.completed_at = _utcnow()

    @property
    def succeeded(self) -> bool:
        """True when the tool ran and its output was captured."""
        return isinstance(self.result, Output)

    @property
    def duration_ms(self) -> Optional[float]:
        if self.completed_at is None:
            return None
        delta = self.completed_at - self.started_at
        return delta.total_seconds() * 1000
