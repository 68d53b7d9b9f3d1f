# =============================================================================
# main.py  —  Entry Point for the Deal Desk Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env and resolves the two memory roots ONCE
#   2. Prints which memory collections exist and how many notes each holds
#   3. Creates the ADK agent, handing it the same memory config so the tool
#      server it spawns reads the same folders
#   4. Loops over user input:
#        /search <term> [all|business|legacy]   search notes locally, no LLM
#        /help                                  list commands
#        anything else                          goes to the agent
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run BEFORE the agent is created: LiteLlm reads the API key and
# create_agent() reads DEAL_DESK_MODEL from the environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.deal_agent import create_agent
from core.config import load_memory_config
from core.errors import DealDeskError
from core.memory_search import MemorySearchEngine, build_query
from core.memory_store import list_records
from core.models import Collection, MemoryConfig
from tools.reporting import error_payload, format_search_report

APP_NAME = "deal_desk"
USER_ID = "investor"

HELP_TEXT = """Commands:
  /search <term> [all|business|legacy]   search saved notes without the agent
  /help                                  show this list
  quit                                   exit
Anything else is sent to the deal-desk agent."""


def describe_memory(config: MemoryConfig) -> list[str]:
    """One status line per memory collection."""
    lines = []
    for collection in Collection:
        root = config.root_for(collection)
        try:
            _, total = list_records(root, collection)
        except DealDeskError as e:
            lines.append(f"  ⚠️  {collection.value}: {root} ({e.user_message})")
            continue
        state = f"{total} notes" if root.is_dir() else "not created yet"
        lines.append(f"  📁 {collection.value}: {root} ({state})")
    return lines


def run_local_search(engine: MemorySearchEngine, args: str) -> str:
    """Handle `/search <term> [category]`; returns the text to print."""
    term, category = args.strip(), "all"
    head, _, tail = term.rpartition(" ")
    if head and tail.lower() in ("all", "business", "legacy"):
        term, category = head.strip(), tail

    try:
        query = build_query(term, category)
        outcome = engine.search(query)
    except DealDeskError as e:
        return f"⚠️  {error_payload(e)['error']}"
    return format_search_report(query.term, outcome)


async def ask_agent(runner: Runner, session_id: str, text: str) -> str:
    """Send one message to the agent; echo tool calls, return the last text."""
    message = types.Content(role="user", parts=[types.Part(text=text)])

    final_response = ""
    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "function_call", None):
                print(f"  🔧 {part.function_call.name}")
            elif getattr(part, "text", None):
                final_response = part.text
    return final_response


async def run_agent():
    """Interactive deal-desk session."""
    memory_config = load_memory_config()
    engine = MemorySearchEngine(memory_config)

    print("=" * 70)
    print("  DEAL DESK")
    print("=" * 70)
    print("\n".join(describe_memory(memory_config)))

    agent = create_agent(memory_config)
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("\n" + HELP_TEXT)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("👋 Goodbye!")
            break
        if not user_input:
            continue
        if user_input == "/help":
            print(HELP_TEXT)
            continue
        if user_input.startswith("/search"):
            print(run_local_search(engine, user_input[len("/search"):]))
            continue

        reply = await ask_agent(runner, session.id, user_input)
        print(f"\n🤖 {reply}" if reply else "\n⚠️  The agent returned no text.")


if __name__ == "__main__":
    asyncio.run(run_agent())
