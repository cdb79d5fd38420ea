"""
Application Layer

Launcher use case.
"""

from .services import Launcher

__all__ = ["Launcher"]
