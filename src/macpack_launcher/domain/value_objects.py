"""
Launch Value Objects

Immutable value objects for bundle launch concepts.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, Union


class LaunchState(str, Enum):
    """State of a single launcher invocation."""

    RUNNING = "running"
    COMPLETED = "completed"


class FailureKind(str, Enum):
    """Why a launch produced no output."""

    CONFIGURATION = "configuration"
    SPAWN = "spawn"
    DECODE = "decode"


@dataclass(frozen=True)
class BundlePath:
    """
    A bundle location as given by the caller and in normalized form.

    Normalization makes the path absolute and collapses "." and ".."
    segments and trailing separators. Symlinks are left alone and the
    path is never checked for existence.

    Attributes:
        raw: Path string exactly as supplied
        normalized: Absolute, standardized path string
    """

    raw: str
    normalized: str

    @classmethod
    def from_raw(cls, raw: str) -> "BundlePath":
        return cls(raw=raw, normalized=os.path.abspath(raw))

    def __str__(self) -> str:
        return self.normalized


@dataclass(frozen=True)
class ToolLocation:
    """
    Absolute path of the macpack executable.

    Attributes:
        path: Location of the executable
    """

    RELATIVE_PATH: ClassVar[Path] = Path(".macpack") / "bin" / "macpack"

    path: Path

    @classmethod
    def under_home(cls, home: Path) -> "ToolLocation":
        return cls(path=home / cls.RELATIVE_PATH)

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class ProcessOutcome:
    """
    Raw result of a finished child process.

    Attributes:
        output: Merged stdout and stderr bytes
        exit_code: Process return code
    """

    output: bytes
    exit_code: int


@dataclass(frozen=True)
class Output:
    """
    Merged stdout/stderr text of a tool run.

    exit_code is informational; a non-zero code is still an Output.

    Attributes:
        text: Decoded merged output
        exit_code: Child process return code, if known
    """

    text: str
    exit_code: Optional[int] = None

    @property
    def is_failure(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "output",
            "text": self.text,
            "exit_code": self.exit_code,
        }


@dataclass(frozen=True)
class Failure:
    """
    A launch that could not produce output.

    Attributes:
        description: Underlying error description, never empty
        kind: Failure category
    """

    description: str
    kind: FailureKind = FailureKind.SPAWN

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise ValueError("Failure description cannot be empty")

    @property
    def is_failure(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "failure",
            "description": self.description,
            "kind": self.kind.value,
        }


ExecutionResult = Union[Output, Failure]
