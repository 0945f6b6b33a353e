# =============================================================================
# agent/clarity_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers Stacks / Clarity questions by
#   calling the tools in tools/mcp_server.py.
#
#   ┌────────────────────────────┐        ┌─────────────────────────┐
#   │  Google ADK Agent          │  MCP   │  FastMCP Server         │
#   │  prompt + LLM (LiteLlm)    │──────▶│  (tools/mcp_server)     │
#   └────────────────────────────┘ stdio  │  list_sips, get_sip ... │
#                                         └────────────┬────────────┘
#                                                      ▼
#                                         ┌─────────────────────────┐
#                                         │  knowledge/ + corpus    │
#                                         └─────────────────────────┘
#
# MODEL:
#   Any LiteLLM model string.  Set STACKS_AGENT_MODEL to switch; the default
#   routes GPT-4o through OpenRouter and needs OPENROUTER_API_KEY.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_clarity_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the Clarity assistant agent wired to our MCP tool server.

    Returns:
        A configured Google ADK Agent instance.
    """

    # =========================================================================
    # Step 1: Configure the MCP tool connection
    # =========================================================================
    # ADK starts the server as a subprocess and speaks MCP over its
    # stdin/stdout.  "uv run" puts the subprocess in the project's .venv;
    # cwd is the project root so "-m tools.mcp_server" resolves no matter
    # where main.py was launched from.
    # =========================================================================
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    # =========================================================================
    # Step 2: Create the ADK Agent
    # =========================================================================
    agent = Agent(
        name="stacks_clarity_assistant",
        model=LiteLlm(model=os.environ.get("STACKS_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_clarity_assistant_prompt(),
        tools=[mcp_tools],
    )

    return agent
