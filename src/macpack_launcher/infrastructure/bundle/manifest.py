"""
Bundle manifest reader.

A bundle describes itself in <bundle>/app.json. The launcher never reads
it; it is only shown to users by the CLI info command.
"""

from pathlib import Path
from typing import Union

import structlog
from pydantic import BaseModel, Field, ValidationError

from macpack_launcher.errors import BundleManifestError

logger = structlog.get_logger(__name__)

MANIFEST_FILENAME = "app.json"


class BundleManifest(BaseModel):
    """Metadata stored in a bundle's app.json."""

    name: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    author: str = Field(..., description="Application author")
    exec: str = Field(..., description="Executable name inside the bundle's exec/ directory")

    def executable_path(self, bundle_path: Union[str, Path]) -> Path:
        """Where the tool looks for the bundled executable."""
        return Path(bundle_path) / "exec" / self.exec


def read_manifest(bundle_path: Union[str, Path]) -> BundleManifest:
    """
    Load and parse a bundle's app.json.

    Args:
        bundle_path: Bundle directory

    Returns:
        Parsed BundleManifest

    Raises:
        BundleManifestError: If the file is missing, unreadable or malformed
    """
    manifest_path = Path(bundle_path) / MANIFEST_FILENAME

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BundleManifestError(
            f"Failed to read {manifest_path}", detail=str(e), path=str(manifest_path)
        ) from e

    try:
        manifest = BundleManifest.model_validate_json(content)
    except ValidationError as e:
        raise BundleManifestError(
            f"Failed to parse {manifest_path}", detail=str(e), path=str(manifest_path)
        ) from e

    logger.debug("Loaded bundle manifest", path=str(manifest_path), name=manifest.name)
    return manifest
