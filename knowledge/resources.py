# =============================================================================
# knowledge/resources.py  —  Topic groups and the Directory Aggregator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Serves the resources/ corpus: markdown guides grouped by topic
#   (clarity, tokens, frontend, management, integration).
#
#   aggregate_resources() is the workhorse behind the build_* tools.  Given
#   an ordered list of groups it returns one document:
#
#     # CLARITY RESOURCES
#
#     <file 1>
#
#     ---
#
#     <file 2>
#
#     ---
#
#     # TOKENS RESOURCES
#     ...
#
#   Groups that don't exist, or hold no markdown, are left out entirely.
#   If nothing at all was found, NO_CONTENT_FOUND is returned instead of an
#   empty string.
# =============================================================================

import logging
import os

from knowledge.files import list_files, read_error_marker, read_source
from knowledge.layout import CorpusLayout
from knowledge.models import InvalidNameError

logger = logging.getLogger(__name__)

TOPIC_GROUPS = ("clarity", "tokens", "frontend", "management", "integration")

RESOURCE_EXTENSION = ".md"
SECTION_SEPARATOR = "\n\n---\n\n"

NO_CONTENT_FOUND = "No content found in the requested resource directories."


def _read_group(layout: CorpusLayout, group: str) -> str:
    """Every markdown file in one group, each followed by a separator.

    Returns "" for unknown, missing, unreadable, or empty groups.
    """
    try:
        dir_path = layout.topic_dir(group)
    except InvalidNameError as exc:
        logger.warning("%s", exc)
        return ""
    if not os.path.isdir(dir_path):
        logger.info("Resource directory not found: %s", dir_path)
        return ""

    try:
        names = list_files(dir_path, RESOURCE_EXTENSION)
    except OSError as exc:
        logger.error("Error reading directory %s: %s", dir_path, exc)
        return ""

    parts = []
    for name in names:
        source = read_source(dir_path, name)
        text = read_error_marker(name) if source is None else source.text
        parts.append(text + SECTION_SEPARATOR)
    return "".join(parts)


def aggregate_resources(layout: CorpusLayout, group_names) -> str:
    """Concatenate the named topic groups, in the order given."""
    combined = []
    for group in group_names:
        content = _read_group(layout, group)
        if content.strip():
            combined.append(f"# {group.upper()} RESOURCES\n\n")
            combined.append(content)

    return "".join(combined) or NO_CONTENT_FOUND


def list_resources(layout: CorpusLayout) -> list[str]:
    """"group/stem" for every markdown guide in the known topic groups."""
    available = []
    for group in TOPIC_GROUPS:
        dir_path = layout.topic_dir(group)
        if not os.path.isdir(dir_path):
            continue
        try:
            names = list_files(dir_path, RESOURCE_EXTENSION)
        except OSError as exc:
            logger.error("Error reading Stacks resource directory %s: %s", dir_path, exc)
            continue
        available.extend(f"{group}/{os.path.splitext(name)[0]}" for name in names)
    return available


def read_resource(layout: CorpusLayout, group: str, name: str) -> str:
    """One markdown guide from a topic group.

    The ".md" extension is optional in name.  Every failure comes back as a
    short explanation rather than an exception.
    """
    try:
        dir_path = layout.topic_dir(group)
    except InvalidNameError as exc:
        return str(exc)
    if not os.path.isdir(dir_path):
        return f"Directory not found: {group}"

    filename = name if name.lower().endswith(RESOURCE_EXTENSION) else f"{name}{RESOURCE_EXTENSION}"
    if os.path.basename(filename) != filename or "\\" in filename or filename.startswith("."):
        return f"Invalid resource name: {name}"

    if not os.path.isfile(os.path.join(dir_path, filename)):
        return f"File not found: {filename} in {group}"

    source = read_source(dir_path, filename)
    if source is None:
        return read_error_marker(filename)
    return source.text
