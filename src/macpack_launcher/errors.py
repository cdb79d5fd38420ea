import json
from typing import Optional, Dict, Any


class MacpackLauncherError(Exception):
    """Base error for the launcher with message, detail and extra context."""

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        **kwargs: Any
    ):
        self.message = message
        self.detail = detail
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        error_dict = {
            "message": self.message,
            "detail": self.detail,
        }
        error_dict.update(self.extra)
        # Remove None values
        return {k: v for k, v in error_dict.items() if v is not None}

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def describe(self) -> str:
        """Single-line description suitable for showing to a user."""
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message

    def __str__(self) -> str:
        parts = [f"Error: {self.message}"]
        if self.detail:
            parts.append(f"Detail: {self.detail}")
        if self.extra:
            parts.append(f"Extra: {self.extra}")
        return "\n".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message='{self.message}', detail='{self.detail}', extra={self.extra})"


class ToolLocationError(MacpackLauncherError):
    """The macpack executable location could not be computed."""


class ProcessSpawnError(MacpackLauncherError):
    """The external tool could not be started, redirected or waited on."""

    def __init__(
        self,
        executable: str,
        message: str = "Failed to launch tool",
        detail: Optional[str] = None,
        **kwargs: Any
    ):
        super().__init__(message, detail, executable=executable, **kwargs)
        self.executable = executable


class BundleManifestError(MacpackLauncherError):
    """A bundle's app.json could not be read or parsed."""
