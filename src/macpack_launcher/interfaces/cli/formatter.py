"""
Result formatting utilities for CLI output
"""

import json

from macpack_launcher.domain.value_objects import ExecutionResult, Output
from macpack_launcher.errors import BundleManifestError
from macpack_launcher.infrastructure.bundle import BundleManifest


class ResultFormatter:
    """
    Format launch results for different output types
    """

    def __init__(self, format: str = "pretty"):
        self.format = format

    def format_result(self, result: ExecutionResult) -> str:
        """
        Format a launch result.

        Pretty output is the tool's text exactly as captured, so it can be
        piped or copied without any decoration.
        """
        if self.format == "json":
            return json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n"
        if result.is_failure:
            return f"Error running bundle: {result.description}\n"
        return result.text

    def format_exit_status(self, result: Output) -> str:
        return f"exit status: {result.exit_code}\n"

    def format_manifest(self, manifest: BundleManifest, bundle_path: str) -> str:
        executable = str(manifest.executable_path(bundle_path))
        if self.format == "json":
            payload = {**manifest.model_dump(), "executable_path": executable}
            return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
        lines = [
            f"Name:    {manifest.name}",
            f"Version: {manifest.version}",
            f"Author:  {manifest.author}",
            f"Exec:    {manifest.exec}",
            f"Runs:    {executable}",
        ]
        return "\n".join(lines) + "\n"

    def format_manifest_error(self, error: BundleManifestError) -> str:
        if self.format == "json":
            return error.to_json() + "\n"
        return f"Error: {error.describe()}\n"
