# =============================================================================
# main.py  —  Entry Point for the Stacks Clarity Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/clarity_agent.py)
#   2. The agent spawns the MCP tool server (tools/mcp_server.py)
#   3. Each question you type is sent to the agent
#   4. Tool calls are printed as they happen, then the final answer
#
# To use the tools from another MCP client instead (an IDE, a desktop
# assistant), run only the server:  uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load environment variables from .env file (OPENROUTER_API_KEY, etc.)
# This must happen BEFORE creating the agent, because LiteLlm reads
# the API key from the environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.clarity_agent import create_agent

APP_NAME = "stacks_clarity_assistant"
USER_ID = "local_user"


async def run_agent():
    """Run the Clarity assistant interactively until the user quits."""
    print("=" * 70)
    print("  STACKS CLARITY ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # =========================================================================
    # Runner + Session
    # =========================================================================
    # InMemorySessionService keeps the conversation in RAM for this process.
    # =========================================================================
    session_service = InMemorySessionService()

    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )

    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about SIPs, Clarity contracts, or Stacks dApps.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # =====================================================================
        # Stream the agent's events: tool calls are echoed as they happen,
        # the last text part is the answer.
        # =====================================================================
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if hasattr(part, "text") and part.text:
                        final_response = part.text

                    if hasattr(part, "function_call") and part.function_call:
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
