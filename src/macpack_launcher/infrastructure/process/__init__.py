"""
Process Infrastructure

Subprocess adapters implementing the process runner ports.
"""

from .subprocess_runner import AsyncSubprocessRunner, SubprocessRunner

__all__ = ["SubprocessRunner", "AsyncSubprocessRunner"]
