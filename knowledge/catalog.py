# =============================================================================
# knowledge/catalog.py  —  Human-readable listings for the agent
# =============================================================================
#
# The index and search functions return plain lists of ids.  The agent
# reads prose, so these helpers turn those lists into short markdown
# answers that also tell it which tool to call next.
# =============================================================================

from collections import Counter

from knowledge.layout import CorpusLayout
from knowledge.sips import list_sip_ids, list_sip_ids_with_code

CODE_MARK = " 🔥 (with Clarity code)"


def _labels(layout: CorpusLayout, sip_ids: list[str]) -> dict[str, str]:
    """Display label per id.

    "sip-9" and "sip-009" both display as SIP-009; when both are present
    each label also names the id that get_sip needs to reach it.
    """
    counts = Counter(int(sip_id) for sip_id in sip_ids)
    labels = {}
    for sip_id in sip_ids:
        label = layout.display_id(sip_id)
        if counts[int(sip_id)] > 1:
            label += f" (get_sip '{sip_id}')"
        labels[sip_id] = label
    return labels


def format_sip_catalog(layout: CorpusLayout) -> str:
    """The list_sips answer: every SIP, marked when it ships Clarity code."""
    sip_ids = list_sip_ids(layout)
    if not sip_ids:
        return "No SIPs found in the standards corpus."

    with_code = set(list_sip_ids_with_code(layout))
    labels = _labels(layout, sip_ids)
    lines = [
        f"- {labels[sip_id]}{CODE_MARK if sip_id in with_code else ''}"
        for sip_id in sip_ids
    ]
    return (
        "Available SIPs:\n"
        + "\n".join(lines)
        + "\n\n🔥 = Contains Clarity smart contract code\n\n"
        "Use get_sip with the SIP number to retrieve full content.\n"
        "Key standards: SIP-009 (NFT), SIP-010 (FT), SIP-012 (Performance)"
    )


def format_search_results(layout: CorpusLayout, query: str, sip_ids: list[str]) -> str:
    if not sip_ids:
        return f"No SIPs found matching '{query}'"
    labels = _labels(layout, sip_ids)
    lines = "\n".join(f"- {labels[sip_id]}" for sip_id in sip_ids)
    return (
        f"SIPs matching '{query}':\n{lines}\n\n"
        "Use get_sip with the SIP number to retrieve full content."
    )


def format_resource_index(names: list[str]) -> str:
    if not names:
        return "No Stacks development resources found."
    lines = "\n".join(f"- {name}" for name in names)
    return (
        f"Available Stacks resources:\n{lines}\n\n"
        "Use get_stacks_resource with the group and name to read one guide."
    )
