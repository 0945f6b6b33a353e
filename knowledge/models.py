# =============================================================================
# knowledge/models.py  —  Data Models (files, lookups, and their rendering)
# =============================================================================
#
# These dataclasses describe what flows through the knowledge layer:
#   - SourceFile: one file read from the corpus (name + raw text)
#   - the SipLookup family: the outcome of assembling a single SIP
#
# TAGGED OUTCOMES:
#   Retrieval code never returns a bare string that might be an error.  It
#   returns Found / NotFound / NoContent / ReadError, and the caller decides
#   what to do with each case.  Only the tool boundary calls render() to turn
#   an outcome into the text the agent reads.
#
#   Tests compare against the outcome type, so they don't depend on the
#   exact wording of a message.
# =============================================================================

from dataclasses import dataclass
from typing import Union


class InvalidNameError(ValueError):
    """Raised when a SIP id or topic group name cannot name a corpus entry."""


# -----------------------------------------------------------------------------
# SourceFile: one prose (.md) or snippet (.clar) file
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SourceFile:
    """A file from the corpus, read fresh for the current request."""

    name: str                          # Filename within its directory
    text: str                          # Raw UTF-8 content, unmodified


# -----------------------------------------------------------------------------
# SipLookup: result of assembling one SIP directory
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Found:
    """The assembled document for a SIP."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class NotFound:
    """No directory exists for the requested SIP."""

    subject: str                       # Display id, e.g. "SIP-009"

    def render(self) -> str:
        return f"{self.subject} directory not found"


@dataclass(frozen=True)
class NoContent:
    """The SIP directory exists but holds no prose or snippet files."""

    subject: str

    def render(self) -> str:
        return f"No documentation or Clarity files found for {self.subject}"


@dataclass(frozen=True)
class ReadError:
    """The SIP directory itself could not be listed."""

    subject: str
    detail: str

    def render(self) -> str:
        return f"Error reading {self.subject}: {self.detail}"


SipLookup = Union[Found, NotFound, NoContent, ReadError]
