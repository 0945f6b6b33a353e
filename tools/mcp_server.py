# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools that an assistant can call.  Each tool is a thin
#   wrapper around a knowledge/ function: it passes the corpus layout in,
#   logs the call, and returns the text unchanged.
#
# HOW IT WORKS (the flow):
#   1. The assistant decides it needs a standard (e.g., the NFT trait)
#   2. It calls a tool by name via MCP (e.g., "get_sip")
#   3. FastMCP validates the parameters and routes the call below
#   4. run_tool() calls knowledge/ and logs the request and response
#   5. The assistant receives one markdown document
#
# TOOL NAMING CONVENTIONS:
#   - list_*   → Discover what exists (cheap, call first)
#   - get_*    → Read one standard, guide, or the Clarity Book
#   - search_* → Find standards mentioning a phrase
#   - build_*  → Curated bundles of topic groups for a kind of task
#   - estimate_* / validate_* → Offline calculators (no corpus, no network)
#   - *_prompt → Fixed guidance text
#   Every tool is read-only and idempotent.
#
# FAILURE CONTRACT:
#   Tools always return text.  Expected problems (unknown SIP, missing
#   directory) are explained by knowledge/ itself.  Anything unexpected is
#   caught in run_tool(), logged with a traceback, and returned as an
#   "Error running <tool>: ..." message.
#
# RUNNING THIS SERVER:
#   a) Run standalone:  python -m tools.mcp_server   (or stacks-clarity-mcp)
#   b) Spawned by the ADK agent via stdio transport (agent/clarity_agent.py)
# =============================================================================

import logging
import os
import sys
from typing import Literal

from dotenv import load_dotenv
from fastmcp import FastMCP

# --- Import knowledge logic ---
# The tools layer depends on knowledge/ and nothing else.
from knowledge import addresses, costs, sips
from knowledge.catalog import format_resource_index, format_search_results, format_sip_catalog
from knowledge.layout import CorpusLayout
from knowledge.prompts import BEST_PRACTICES_PROMPT, DEBUGGING_HELPER, DEVELOPMENT_REMINDER
from knowledge.resources import TOPIC_GROUPS, aggregate_resources, list_resources, read_resource

load_dotenv()

SERVER_NAME = "Stacks Clarity MCP Server"
SERVER_VERSION = "0.1.0"

# Subscripting Literal with a tuple spreads its members, so each schema
# enum follows the tuple it is built from.
TopicGroup = Literal[TOPIC_GROUPS]
CostOperation = Literal[costs.OPERATIONS]
Network = Literal[addresses.NETWORKS]

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses (size and first line; documents are long)
#     - YELLOW for intermediate status/progress messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=os.environ.get("STACKS_MCP_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the response size and first line in GREEN, then return it."""
    first_line = result.split("\n", 1)[0][:80]
    logging.info(f"{_GREEN}  ← {tool_name} response: {len(result)} chars, {first_line!r}{_RESET}")
    return result


def run_tool(tool_name: str, fn, **params) -> str:
    """Call fn(**params) for a tool, logging the exchange.

    Unexpected exceptions never reach the MCP client; they are logged and
    turned into an error message so the conversation can continue.
    """
    _log_request(tool_name, **params)
    try:
        result = fn(**params)
    except Exception as exc:
        logging.exception(f"{tool_name} failed")
        result = f"Error running {tool_name}: {exc}"
    return _log_response(tool_name, result)


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# The corpus layout is decided once by the caller and closed over by every
# tool, so a test can point the whole server at a temporary corpus.
#
# The docstrings are the tool descriptions the LLM sees: they say WHEN to
# call each tool, not how it is implemented.
# =============================================================================
def create_server(layout: CorpusLayout) -> FastMCP:
    mcp = FastMCP(SERVER_NAME)

    # -------------------------------------------------------------------------
    # Server info
    # -------------------------------------------------------------------------
    @mcp.tool()
    def get_mcp_version() -> str:
        """Returns the version of the MCP server."""
        return run_tool("get_mcp_version", lambda: SERVER_VERSION)

    # -------------------------------------------------------------------------
    # Stacks Clarity standards (SIPs + Clarity Book)
    # -------------------------------------------------------------------------
    @mcp.tool()
    def list_sips() -> str:
        """Get a list of all available SIPs (Stacks Improvement Proposals) in the knowledge base.

        WHEN TO CALL THIS: First, to discover which Stacks standards exist.
        SIPs that ship Clarity smart contract code are marked with 🔥.
        """
        return run_tool("list_sips", lambda: format_sip_catalog(layout))

    @mcp.tool()
    def get_sip(sip_number: str) -> str:
        """Get the complete content of a specific SIP by number, including any Clarity smart contract code.

        Args:
            sip_number: The SIP number (e.g., '009' for SIP-009 NFT standard,
                '010' for SIP-010 FT standard).  Leading zeros are optional.

        Returns:
            A markdown document: the SIP's documentation files first, then
            each Clarity contract in a ```clarity block.  Returns a short
            "not found" message if the SIP does not exist.
        """
        return run_tool(
            "get_sip",
            lambda sip_number: sips.get_sip_content(layout, sip_number),
            sip_number=sip_number,
        )

    @mcp.tool()
    def get_clarity_book() -> str:
        """Get the complete Clarity Book - comprehensive Clarity language documentation covering all language features, syntax, and best practices."""
        return run_tool("get_clarity_book", lambda: sips.get_clarity_book(layout))

    @mcp.tool()
    def get_token_standards() -> str:
        """Get the essential token standards for Stacks - SIP-009 (NFT) and SIP-010 (Fungible Token) complete with Clarity trait definitions and implementation guidance."""
        return run_tool("get_token_standards", lambda: sips.get_token_standards(layout))

    @mcp.tool()
    def search_sips(query: str) -> str:
        """Search through all SIPs for content matching a specific query.

        WHEN TO CALL THIS: To find standards related to a topic when you
        don't know the SIP number.  Matching is a case-insensitive
        substring test over each SIP's full text.

        Args:
            query: Search query (e.g., 'fungible token', 'NFT', 'metadata',
                'cost analysis').
        """
        return run_tool(
            "search_sips",
            lambda query: format_search_results(layout, query, sips.search_sips(layout, query)),
            query=query,
        )

    # -------------------------------------------------------------------------
    # Stacks development resources (topic groups)
    # -------------------------------------------------------------------------
    @mcp.tool()
    def list_stacks_resources() -> str:
        """List every Stacks development guide as 'group/name'.

        WHEN TO CALL THIS: When you want one focused guide instead of a
        whole build_* bundle.  Read a guide with get_stacks_resource.
        """
        return run_tool("list_stacks_resources", lambda: format_resource_index(list_resources(layout)))

    @mcp.tool()
    def get_stacks_resource(group: TopicGroup, name: str) -> str:
        """Read one Stacks development guide.

        Args:
            group: The topic group (clarity, tokens, frontend, management,
                integration).
            name: The guide name as shown by list_stacks_resources, with or
                without the .md extension.
        """
        return run_tool(
            "get_stacks_resource",
            lambda group, name: read_resource(layout, group, name),
            group=group,
            name=name,
        )

    @mcp.tool()
    def get_stacks_resources(groups: list[TopicGroup]) -> str:
        """Get every guide in the given topic groups, in the order listed.

        Args:
            groups: Topic groups to combine, e.g. ["clarity", "tokens"].
        """
        return run_tool(
            "get_stacks_resources",
            lambda groups: aggregate_resources(layout, groups),
            groups=list(groups),
        )

    @mcp.tool()
    def build_clarity_smart_contract() -> str:
        """Build a Clarity smart contract - returns comprehensive resources for Clarity development including SIP standards, security patterns, and best practices. Use this tool when you need guidance on building smart contracts for Stacks."""
        return run_tool(
            "build_clarity_smart_contract",
            lambda: aggregate_resources(layout, ["clarity", "tokens"]),
        )

    @mcp.tool()
    def build_stacks_frontend() -> str:
        """Build a Stacks dApp frontend - returns comprehensive resources for frontend development including wallet integration, transaction signing, and post-condition handling. Use this tool when you need guidance on building frontends for Stacks dApps."""
        return run_tool(
            "build_stacks_frontend",
            lambda: aggregate_resources(layout, ["frontend"]),
        )

    @mcp.tool()
    def build_stacks_dapp() -> str:
        """Build a complete full-stack Stacks dApp - returns comprehensive resources covering Clarity contracts, frontend integration, token standards, and security patterns. Use this tool when you need guidance on building complete Stacks applications."""
        return run_tool(
            "build_stacks_dapp",
            lambda: aggregate_resources(layout, ["clarity", "frontend", "tokens", "management"]),
        )

    # -------------------------------------------------------------------------
    # Offline calculators (no corpus, no network)
    # -------------------------------------------------------------------------
    @mcp.tool()
    def estimate_operation_cost(operation: CostOperation, data_size: int, iterations: int = 1) -> str:
        """Estimate the computational cost of specific Clarity operations based on SIP-012 cost functions. Useful for planning contract optimization.

        Args:
            operation: Type of operation to estimate.
            data_size: Size of data being processed (e.g., list length,
                string length).
            iterations: Number of iterations for batch operations.
        """
        return run_tool(
            "estimate_operation_cost",
            costs.format_cost_estimate,
            operation=operation,
            data_size=data_size,
            iterations=iterations,
        )

    @mcp.tool()
    def validate_stacks_address(address: str, network: Network = "mainnet") -> str:
        """Validate a Stacks address format and check if it's correctly formatted for the specified network.

        WHEN TO CALL THIS: Before using an address in a contract call,
        post-condition, or deployment plan.  This checks the format only;
        it does not look the account up on chain.
        """
        return run_tool(
            "validate_stacks_address",
            addresses.validate_stacks_address,
            address=address,
            network=network,
        )

    # -------------------------------------------------------------------------
    # Prompts (fixed text)
    # -------------------------------------------------------------------------
    @mcp.tool()
    def stacks_clarity_best_practices_prompt() -> str:
        """PRIMARY PROMPT: Use this as the main system prompt when building any Stacks dApp or Clarity contract. Sets up mandatory MCP consultation workflow for Stacks development and ensures SIP compliance."""
        return run_tool("stacks_clarity_best_practices_prompt", lambda: BEST_PRACTICES_PROMPT)

    @mcp.tool()
    def stacks_clarity_development_reminder_prompt() -> str:
        """MID-DEVELOPMENT REMINDER: Use this prompt when you notice the conversation has gone few exchanges without using MCP tools, or when implementing new Stacks features to reinforce MCP consultation habits."""
        return run_tool("stacks_clarity_development_reminder_prompt", lambda: DEVELOPMENT_REMINDER)

    @mcp.tool()
    def stacks_debugging_helper_prompt() -> str:
        """ERROR RECOVERY PROMPT: Use this immediately when encountering Stacks/Clarity errors, stuck in debugging loops, or when about to try generic blockchain solutions. Redirects to MCP-first debugging approach."""
        return run_tool("stacks_debugging_helper_prompt", lambda: DEBUGGING_HELPER)

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    layout = CorpusLayout.from_env()
    _log_status(f"Resources: {layout.resources_dir}")
    _log_status(f"Standards: {layout.standards_dir}")
    create_server(layout).run()


if __name__ == "__main__":
    main()
