"""
Application Services

Use-case orchestration on top of the domain layer.
"""

from .launcher_service import Launcher

__all__ = ["Launcher"]
