# =============================================================================
# knowledge/sips.py  —  SIP Index, SIP Content Assembler, Corpus Search
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers every question about the stacks-clarity-standards corpus:
#     - which SIPs exist (and which ship Clarity code)
#     - what one SIP says, as a single markdown document
#     - which SIPs mention a phrase
#     - what the Clarity Book says
#
# ALWAYS RESCAN:
#   Nothing is cached.  Each call lists directories and reads files again,
#   so a SIP added to disk while the server runs shows up on the next call.
#
# DOCUMENT FORMAT (one SIP):
#
#   # SIP-009
#
#   ## sip-009-nft-standard.md
#
#   <raw markdown>
#
#   ---
#
#   ## Clarity Contract: nft-trait.clar
#
#   ```clarity
#   <raw clarity>
#   ```
#
#   ---
#
#   Prose files always come before snippet files; each group is sorted by
#   filename.
# =============================================================================

import logging
import os
import re

from knowledge.files import list_files, read_error_marker, read_source
from knowledge.layout import CorpusLayout, normalize_sip_id
from knowledge.models import (
    Found,
    InvalidNameError,
    NoContent,
    NotFound,
    ReadError,
    SipLookup,
)

logger = logging.getLogger(__name__)

PROSE_EXTENSION = ".md"
SNIPPET_EXTENSION = ".clar"
SNIPPET_LANGUAGE = "clarity"

SECTION_SEPARATOR = "\n\n---\n\n"

# SIP-009 (non-fungible) and SIP-010 (fungible) token standards.
TOKEN_STANDARD_IDS = ("009", "010")


# =============================================================================
# SIP Index
# =============================================================================
def _scan_sip_dirs(layout: CorpusLayout) -> list[tuple[str, str]]:
    """(sip_id, path) for every "<prefix><digits>" directory, numerically sorted."""
    pattern = re.compile(rf"^{re.escape(layout.sip_prefix)}(\d+)$")
    entries = []
    for name in os.listdir(layout.standards_dir):
        match = pattern.match(name)
        path = os.path.join(layout.standards_dir, name)
        if match and os.path.isdir(path):
            entries.append((match.group(1), path))
    entries.sort(key=lambda entry: (int(entry[0]), entry[0]))
    return entries


def list_sip_ids(layout: CorpusLayout) -> list[str]:
    """All SIP numbers present on disk, ascending by integer value.

    Returns an empty list if the standards root is missing or unreadable.
    """
    try:
        return [sip_id for sip_id, _ in _scan_sip_dirs(layout)]
    except OSError as exc:
        logger.warning("Error reading SIPs directory %s: %s", layout.standards_dir, exc)
        return []


def list_sip_ids_with_code(layout: CorpusLayout) -> list[str]:
    """SIP numbers whose directory contains at least one Clarity snippet."""
    try:
        entries = _scan_sip_dirs(layout)
    except OSError as exc:
        logger.warning("Error reading SIPs directory %s: %s", layout.standards_dir, exc)
        return []

    with_code = []
    for sip_id, path in entries:
        try:
            if list_files(path, SNIPPET_EXTENSION):
                with_code.append(sip_id)
        except OSError as exc:
            # Directory vanished or became unreadable between scan and check.
            logger.debug("Skipping SIP-%s while checking for Clarity code: %s", sip_id, exc)
    return with_code


# =============================================================================
# SIP Content Assembler
# =============================================================================
def _resolve_sip_dir(layout: CorpusLayout, sip_id: str) -> str | None:
    for candidate in layout.sip_dir_candidates(sip_id):
        if os.path.isdir(candidate):
            return candidate
    return None


def _prose_section(name: str, text: str) -> str:
    return f"## {name}\n\n{text}{SECTION_SEPARATOR}"


def _snippet_section(name: str, text: str) -> str:
    return (
        f"## Clarity Contract: {name}\n\n"
        f"```{SNIPPET_LANGUAGE}\n{text}\n```{SECTION_SEPARATOR}"
    )


def lookup_sip(layout: CorpusLayout, sip_number: str) -> SipLookup:
    """Assemble one SIP into a tagged outcome.

    Args:
        layout: Where the corpus lives.
        sip_number: "9", "009" or "SIP-009"; leading zeros are optional.

    Returns:
        Found with the assembled document, NotFound if no directory exists
        (or the value is not a SIP number), NoContent if the directory has
        neither prose nor snippets, ReadError if it cannot be listed.
    """
    return _assemble_sip(layout, sip_number, mark_unreadable=True)


def _assemble_sip(layout: CorpusLayout, sip_number: str, mark_unreadable: bool) -> SipLookup:
    # With mark_unreadable=False a file that fails to read is left out
    # instead of replaced by its "Error reading file" marker.
    try:
        sip_id = normalize_sip_id(sip_number)
    except InvalidNameError:
        return NotFound(subject=f"SIP-{sip_number.strip()}")

    subject = layout.display_id(sip_id)
    sip_dir = _resolve_sip_dir(layout, sip_id)
    if sip_dir is None:
        return NotFound(subject=subject)

    try:
        prose_names = list_files(sip_dir, PROSE_EXTENSION)
        snippet_names = list_files(sip_dir, SNIPPET_EXTENSION)
    except OSError as exc:
        logger.error("Error listing %s: %s", sip_dir, exc)
        return ReadError(subject=subject, detail=str(exc))

    if not prose_names and not snippet_names:
        return NoContent(subject=subject)

    parts = [f"# {subject}\n\n"]
    sections = [(name, _prose_section) for name in prose_names]
    sections += [(name, _snippet_section) for name in snippet_names]
    for name, render in sections:
        source = read_source(sip_dir, name)
        if source is not None:
            parts.append(render(source.name, source.text))
        elif mark_unreadable:
            parts.append(read_error_marker(name) + SECTION_SEPARATOR)

    return Found(text="".join(parts))


def get_sip_content(layout: CorpusLayout, sip_number: str) -> str:
    """The assembled SIP document, or a readable explanation of why not."""
    return lookup_sip(layout, sip_number).render()


def get_token_standards(layout: CorpusLayout) -> str:
    """SIP-009 and SIP-010 under one heading.

    A missing standard contributes its own not-found message; the other
    standard is still returned.
    """
    nft_standard, ft_standard = (
        get_sip_content(layout, sip_id) for sip_id in TOKEN_STANDARD_IDS
    )
    return f"# TOKEN STANDARDS\n\n{nft_standard}\n\n{ft_standard}"


def get_clarity_book(layout: CorpusLayout) -> str:
    """The full Clarity language reference as stored on disk."""
    path = layout.book_path
    if not os.path.isfile(path):
        return f"Clarity Book not found at {layout.book_filename}"
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading Clarity Book %s: %s", path, exc)
        return f"Error reading Clarity Book: {exc}"


# =============================================================================
# Corpus Search
# =============================================================================
# A linear scan: every SIP is assembled and tested on every query.  Cost is
# O(number of SIPs x document size), fine for a corpus of a few dozen SIPs.
# =============================================================================
def search_sips(layout: CorpusLayout, query: str) -> list[str]:
    """SIP numbers whose assembled document contains query (case-insensitive).

    Only SIPs that assemble successfully are searched, so "not found" and
    "no content" messages never produce matches.  Files that cannot be read
    are left out of the searched text, so their "Error reading file"
    markers never match either.  A blank query matches every SIP that has
    content.  Results keep the numeric listing order.
    """
    needle = query.casefold()
    if not needle.strip():
        needle = ""

    matches = []
    for sip_id in list_sip_ids(layout):
        outcome = _assemble_sip(layout, sip_id, mark_unreadable=False)
        if isinstance(outcome, Found) and needle in outcome.text.casefold():
            matches.append(sip_id)
    return matches
