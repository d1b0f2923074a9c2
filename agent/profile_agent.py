# =============================================================================
# agent/profile_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the narrator agent: an ADK Agent whose LLM (via LiteLlm) talks
#   about a traveler's profile, and whose only source of facts is the
#   FastMCP tool server in tools/mcp_server.py.
#
#   ┌──────────────────────────────┐      ┌──────────────────────────┐
#   │  Google ADK Agent            │      │  FastMCP Server          │
#   │  prompt + LiteLlm model      │─────▶│  • list_travel_profiles  │
#   │                              │ stdio│  • get_travel_profile    │
#   └──────────────────────────────┘      │  • get_country_colors    │
#                                         └────────────┬─────────────┘
#                                                      ▼
#                                          core/ (stats engine, loaders)
#
# MODEL:
#   "openrouter/openai/gpt-4o" by default.  Override with PROFILE_AGENT_MODEL
#   (any LiteLlm model string).  LiteLlm reads OPENROUTER_API_KEY from the
#   environment, which main.py populates from .env.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_profile_narrator_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the travel profile narrator agent.

    The MCP server is started as a subprocess with "uv run", so it shares
    the project's virtual environment, and with the project root as its
    working directory, so `tools.mcp_server` and `core` import cleanly.

    Returns:
        A configured Google ADK Agent instance.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    return Agent(
        name="travel_profile_narrator",
        model=LiteLlm(model=os.environ.get("PROFILE_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_profile_narrator_prompt(),
        tools=[mcp_tools],
    )
