# =============================================================================
# agent/deal_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the deal-desk agent: an ADK Agent whose reasoning runs on any
#   LiteLlm-supported model and whose capabilities come from the FastMCP
#   server in tools/mcp_server.py.
#
#   ┌──────────────────────────┐   stdio (MCP)   ┌────────────────────────┐
#   │  ADK Agent (LiteLlm)     │ ──────────────▶ │  tools/mcp_server.py   │
#   │  instruction: prompt.py  │                 │  search/save memory,   │
#   └──────────────────────────┘                 │  calculators, replies  │
#                                                └───────────┬────────────┘
#                                                            ▼
#                                                    core/ (pure Python)
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess and talks to it over
#   stdin/stdout.  That is why the server logs only to stderr.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_deal_analyst_prompt
from core.config import load_memory_config, server_environment
from core.models import MemoryConfig

MODEL_ENV = "DEAL_DESK_MODEL"
DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent(memory_config: Optional[MemoryConfig] = None) -> Agent:
    """Create and configure the deal-desk agent.

    memory_config is the one already resolved by the caller; when omitted it
    is loaded from the environment.  Either way the spawned tool server
    receives both roots as absolute paths.

    The model string is read from DEAL_DESK_MODEL (any LiteLlm route, e.g.
    "openrouter/anthropic/claude-3.5-sonnet"); the matching API key is
    read by LiteLlm from the environment.

    Returns:
        A configured Google ADK Agent instance.
    """

    # =========================================================================
    # Step 1: Configure the MCP tool connection
    # =========================================================================
    # The server is launched as a module from the project root so that the
    # core/ and tools/ packages import the same way they do in tests.  The
    # current interpreter is reused so the subprocess sees the same venv.
    # =========================================================================
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=project_root,
            env=server_environment(memory_config or load_memory_config()),
        ),
    )

    # =========================================================================
    # Step 2: Create the ADK Agent
    # =========================================================================
    model_name = os.environ.get(MODEL_ENV) or DEFAULT_MODEL

    agent = Agent(
        name="deal_desk_analyst",
        model=LiteLlm(model=model_name),
        instruction=get_deal_analyst_prompt(),
        tools=[mcp_tools],
    )

    return agent
