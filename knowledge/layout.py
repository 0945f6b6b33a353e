# =============================================================================
# knowledge/layout.py  —  Corpus Layout Resolver
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns logical names ("the clarity topic group", "SIP 9", "the Clarity
#   Book") into physical paths.  It does no I/O beyond what the caller asks
#   for later; it only computes where things should be.
#
# TWO CORPORA:
#   resources/                    topic groups of markdown guides
#     clarity/  tokens/  frontend/  management/  integration/
#   stacks-clarity-standards/     one directory per SIP, plus the book
#     sip-009/  sip-010/  ...  clarity_book.txt
#
# ANCHORING:
#   Both roots default to directories next to the installed packages, found
#   from this file's own location.  The server gives the same answers no
#   matter which directory it was launched from.
# =============================================================================

import os
import re
from dataclasses import dataclass, replace

from knowledge.models import InvalidNameError

# Repository root: the directory that contains the knowledge/ package.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# "9", "009", "SIP-9", "sip009", "SIP 010" all name the same standard.
_SIP_ID_PATTERN = re.compile(r"^(?:sip[-_ ]?)?(\d+)$", re.IGNORECASE)


def normalize_sip_id(raw: str) -> str:
    """Reduce a caller-supplied SIP reference to its digits.

    Raises:
        InvalidNameError: if the value does not name a numeric SIP.
    """
    match = _SIP_ID_PATTERN.match(raw.strip())
    if match is None:
        raise InvalidNameError(f"Not a SIP number: {raw!r}")
    return match.group(1)


def pad_sip_id(sip_id: str, width: int = 3) -> str:
    """Zero-pad a SIP number for display and lookup ("9" -> "009")."""
    return sip_id.rjust(width, "0")


@dataclass(frozen=True)
class CorpusLayout:
    """Where the two corpora live, and how SIP directories are named."""

    resources_dir: str
    standards_dir: str
    book_filename: str = "clarity_book.txt"
    sip_prefix: str = "sip-"
    id_width: int = 3

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    @classmethod
    def default(cls) -> "CorpusLayout":
        """The corpus shipped alongside this repository."""
        return cls(
            resources_dir=os.path.join(PROJECT_ROOT, "resources"),
            standards_dir=os.path.join(PROJECT_ROOT, "stacks-clarity-standards"),
        )

    @classmethod
    def from_env(cls, environ=None) -> "CorpusLayout":
        """The default layout with STACKS_MCP_*_DIR overrides applied."""
        environ = os.environ if environ is None else environ
        layout = cls.default()
        overrides = {}
        if environ.get("STACKS_MCP_RESOURCES_DIR"):
            overrides["resources_dir"] = os.path.abspath(environ["STACKS_MCP_RESOURCES_DIR"])
        if environ.get("STACKS_MCP_STANDARDS_DIR"):
            overrides["standards_dir"] = os.path.abspath(environ["STACKS_MCP_STANDARDS_DIR"])
        return replace(layout, **overrides) if overrides else layout

    # -------------------------------------------------------------------------
    # Topic groups
    # -------------------------------------------------------------------------
    def topic_dir(self, name: str) -> str:
        """Path of a topic group directory under resources_dir.

        Raises:
            InvalidNameError: for empty names, absolute paths, or anything
                that would step outside resources_dir.
        """
        if (
            not name
            or os.path.isabs(name)
            or "/" in name
            or "\\" in name
            or name in (".", "..")
        ):
            raise InvalidNameError(f"Invalid topic group name: {name!r}")
        return os.path.join(self.resources_dir, name)

    # -------------------------------------------------------------------------
    # SIP directories
    # -------------------------------------------------------------------------
    def display_id(self, sip_id: str) -> str:
        return f"SIP-{pad_sip_id(sip_id, self.id_width)}"

    def sip_dir_name(self, sip_id: str) -> str:
        return f"{self.sip_prefix}{pad_sip_id(sip_id, self.id_width)}"

    def sip_dir_candidates(self, sip_id: str) -> list[str]:
        """Directories that may hold a SIP, literal name first.

        An id taken from the listing names its own directory, so "9" finds
        "sip-9" even when "sip-009" also exists.  The padded name is the
        fallback, which lets a caller type "9" for a corpus that stores
        "sip-009".
        """
        names = [f"{self.sip_prefix}{sip_id}", self.sip_dir_name(sip_id)]
        unique = list(dict.fromkeys(names))
        return [os.path.join(self.standards_dir, name) for name in unique]

    @property
    def book_path(self) -> str:
        return os.path.join(self.standards_dir, self.book_filename)
