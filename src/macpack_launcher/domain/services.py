"""
Domain Services

Stateless helpers for locating the macpack tool and turning captured
bytes into text.
"""

from pathlib import Path
from typing import List, Optional

from macpack_launcher.domain.value_objects import BundlePath, ToolLocation
from macpack_launcher.errors import ToolLocationError

OUTPUT_ENCODING = "utf-8"


def resolve_home_directory() -> Path:
    """
    Resolve the current user's home directory.

    Raises:
        ToolLocationError: If no absolute home directory can be determined
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise ToolLocationError(
            "Could not resolve the current user's home directory",
            detail=str(e) or None,
        ) from e

    # expanduser() hands back "~" unchanged when it has nothing to go on
    if not home.is_absolute():
        raise ToolLocationError(
            "Could not resolve the current user's home directory",
            detail=f"got non-absolute path {str(home)!r}",
        )
    return home


def resolve_tool_location(home: Optional[Path] = None) -> ToolLocation:
    """
    Compute <home>/.macpack/bin/macpack.

    Called for every launch; the result is never cached.
    """
    if home is None:
        home = resolve_home_directory()
    return ToolLocation.under_home(home)


def build_command(tool: ToolLocation, bundle: BundlePath) -> List[str]:
    """The tool receives the normalized bundle path as its only argument."""
    return [str(tool.path), bundle.normalized]


def decode_output(data: bytes, encoding: str = OUTPUT_ENCODING) -> str:
    """
    Decode captured tool output.

    Raises:
        UnicodeDecodeError: On any invalid byte sequence; nothing is replaced
    """
    return data.decode(encoding, errors="strict")
