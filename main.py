# =============================================================================
# main.py  —  Entry Point for the Travel Profile Narrator
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                        # chat with the narrator agent
#   uv run python main.py --print jaredmorgenstern   # dump page JSON, no LLM
#
# WHAT HAPPENS (interactive mode):
#   1. Creates the Google ADK agent (agent/profile_agent.py)
#   2. Sets up an in-memory session
#   3. Sends each question to the agent, which calls the MCP tools
#   4. Prints the agent's final answer
#
# --print MODE:
#   Builds the profile page directly through core/ and writes it to stdout
#   as JSON.  Exit status 1 means the user was not found.
# =============================================================================

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

# Load environment variables from .env (OPENROUTER_API_KEY, TRAVEL_*).
# This must happen BEFORE creating the agent: LiteLlm reads the key when
# it initializes, and core/config.py reads TRAVEL_* on every request.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.profile_agent import create_agent
from core.profile_page import build_profile_page

APP_NAME = "travel_profile"


def print_profile(username: str) -> int:
    """Write a traveler's profile page as JSON.  Returns the exit status."""
    page = build_profile_page(username)
    if page is None:
        print(f"User '{username}' not found.", file=sys.stderr)
        return 1
    print(json.dumps(page.to_dict(), indent=2, ensure_ascii=False))
    return 0


async def run_agent():
    """Run the narrator agent in an interactive loop."""
    print("=" * 70)
    print("  TRAVEL PROFILE NARRATOR")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id="demo_user",
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about a traveler, e.g. \"Show me jaredmorgenstern's travels\"")
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

        final_response = ""
        async for event in runner.run_async(
            user_id="demo_user",
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


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Travel profile narrator")
    parser.add_argument(
        "--print",
        dest="username",
        metavar="USERNAME",
        help="print the profile page JSON for USERNAME and exit",
    )
    args = parser.parse_args(argv)

    if args.username:
        return print_profile(args.username)

    asyncio.run(run_agent())
    return 0


if __name__ == "__main__":
    sys.exit(main())
