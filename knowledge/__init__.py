# =============================================================================
# knowledge/__init__.py
# =============================================================================
# This package contains ALL retrieval logic for the Stacks Clarity knowledge
# base: where the corpus lives, how SIP documents are assembled, how the
# corpus is searched, and how topic directories are merged into one answer.
# It also holds two offline calculators that never touch the corpus:
# costs.py (SIP-012 cost estimates) and addresses.py (address format).
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  Every module here is pure Python, so it can be exercised
#   against a throwaway corpus in a test without starting a server.
#
# Every corpus operation takes a CorpusLayout argument.  The entry point builds one
# layout and hands it down; there is no module-level corpus location.
# =============================================================================
