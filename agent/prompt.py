# =============================================================================
# agent/prompt.py  —  The Agent's System Prompt
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the instruction for the Clarity development assistant.  The core
#   of it is the same best-practices prompt the MCP server hands out through
#   stacks_clarity_best_practices_prompt, so a client that uses this agent
#   and a client that only talks to the server get the same guidance.
#
#   On top of that we add the date and a short section on how to present
#   SIP material back to the user.
# =============================================================================

from datetime import date

from knowledge.prompts import BEST_PRACTICES_PROMPT


def get_clarity_assistant_prompt() -> str:
    """Build the system prompt with today's actual date injected."""
    today = date.today().isoformat()  # e.g., "2025-02-15"

    return f"""{BEST_PRACTICES_PROMPT}

TODAY'S DATE: {today}

═══════════════════════════════════════════════════════════════════════
PRESENTING RESULTS
═══════════════════════════════════════════════════════════════════════
  • Quote Clarity code from get_sip / get_token_standards verbatim,
    inside ```clarity blocks; never paraphrase a trait definition
  • Name the SIP (e.g. SIP-010) every time you rely on one
  • If a tool says a SIP or guide was not found, say so and call
    list_sips or list_stacks_resources instead of guessing
  • Keep answers focused: summarize long guides, link them by name
"""
