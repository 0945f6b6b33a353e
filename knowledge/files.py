# =============================================================================
# knowledge/files.py  —  Directory listing and file reads
# =============================================================================
#
# Every corpus read goes through these two helpers so that the ordering rule
# (sorted by filename) and the failure rule (one bad file never aborts the
# whole answer) live in exactly one place.
# =============================================================================

import logging
import os

from knowledge.models import SourceFile

logger = logging.getLogger(__name__)


def list_files(dir_path: str, extension: str) -> list[str]:
    """Filenames in dir_path with the given extension, sorted by name.

    The extension match is case-insensitive.  Raises OSError if the
    directory cannot be listed; callers decide whether that is fatal.
    """
    extension = extension.lower()
    return sorted(
        name
        for name in os.listdir(dir_path)
        if os.path.splitext(name)[1].lower() == extension
        and os.path.isfile(os.path.join(dir_path, name))
    )


def read_source(dir_path: str, name: str) -> SourceFile | None:
    """Read one file as UTF-8, or return None after logging the failure."""
    path = os.path.join(dir_path, name)
    try:
        with open(path, encoding="utf-8") as fh:
            return SourceFile(name=name, text=fh.read())
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading file %s: %s", path, exc)
        return None


def read_error_marker(name: str) -> str:
    return f"Error reading file: {name}"
