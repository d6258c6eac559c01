"""
Chat with an AI agent that controls your Philips Hue lights.
Provides an interactive chat interface and a single-query mode.
"""
import logging
import os
import sys
from dotenv import load_dotenv
from strands import Agent

from hue_agent.tools import change_light_color, change_state, get_lights

# Load environment variables
load_dotenv()

SYSTEM_PROMPT = """You are a helpful assistant that controls the user's Philips Hue lights.

Capabilities:
- List the lights and whether they are on (get_lights)
- Turn a light, or all lights, on or off (change_state)
- Change the color of a light, or all lights, to an RGB value (change_light_color)

Rules:
- Call get_lights first when you need a light's id
- Leave id unset only when the user asks for every light
- Translate color names into RGB values yourself
- If a tool reports success as false, tell the user what failed

Be concise and friendly.
"""


def log_level(name):
    """Numeric logging level for a level name, WARNING if the name is unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def create_model():
    """Create the chat model selected by MODEL_PROVIDER."""
    provider = os.getenv("MODEL_PROVIDER", "anthropic").strip().lower()

    if provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY not found. Create a .env file with your API key")

        from strands.models.openai import OpenAIModel

        return OpenAIModel(
            client_args={"api_key": api_key},
            model_id=os.getenv("OPENAI_MODEL_ID", "gpt-4o"),
            params={"max_tokens": 4000, "temperature": 0.7},
        )

    if provider == "anthropic":
        api_key = os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY not found. Create a .env file with your API key")

        from strands.models.anthropic import AnthropicModel

        return AnthropicModel(
            client_args={"api_key": api_key},
            max_tokens=4000,
            model_id=os.getenv("ANTHROPIC_MODEL_ID", "claude-sonnet-4-20250514"),
            params={"temperature": 0.7},
        )

    raise ValueError(f"Unknown MODEL_PROVIDER: {provider}. Use 'anthropic' or 'openai'")


def create_agent():
    """Create and configure the lights agent."""
    return Agent(
        model=create_model(),
        system_prompt=SYSTEM_PROMPT,
        tools=[get_lights, change_state, change_light_color],
    )


def interactive_mode(agent):
    """Run agent in interactive chat mode."""
    print("💡 Hue Lights Agent (type 'quit' to exit, 'metrics' to see usage)\n")

    while True:
        try:
            user_input = input("User > ").strip()

            if not user_input:
                continue

            if user_input.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Goodbye!")
                break

            if user_input.lower() == 'metrics':
                metrics = agent.event_loop_metrics.get_summary()
                print("\n📊 Token Usage:")
                print(f"  Input:  {metrics['accumulated_usage']['inputTokens']:,}")
                print(f"  Output: {metrics['accumulated_usage']['outputTokens']:,}")
                print(f"  Total:  {metrics['accumulated_usage']['totalTokens']:,}\n")
                continue

            response = agent(user_input)
            print(f"\nAgent > {response}\n")

        except (KeyboardInterrupt, EOFError):
            print("\n\n👋 Goodbye!")
            break
        except Exception as e:
            logging.getLogger(__name__).debug("Chat turn failed", exc_info=True)
            print(f"\n❌ Error: {e}\n")


def single_query_mode(agent, query):
    """Run agent with a single query."""
    print(f"Query: {query}\n")

    try:
        response = agent(query)
        print(f"Response: {response}\n")

        metrics = agent.event_loop_metrics.get_summary()
        print("📊 Metrics:")
        print(f"  Tokens: {metrics['accumulated_usage']['totalTokens']}")

    except Exception as e:
        print(f"❌ Error: {e}")


def main():
    """Main entry point."""
    logging.basicConfig(
        level=log_level(os.getenv("LOG_LEVEL", "WARNING")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if len(sys.argv) > 1 and sys.argv[1] in ['-h', '--help']:
        print("Hue Lights Agent\n")
        print("Usage:")
        print("  python main.py                        # Interactive mode")
        print("  python main.py 'turn off all lights'  # Single query")
        print("  python main.py --help                 # Show this help")
        return

    try:
        agent = create_agent()
    except Exception as e:
        print(f"❌ Failed to create agent: {e}")
        sys.exit(1)

    if len(sys.argv) > 1:
        query = ' '.join(sys.argv[1:])
        single_query_mode(agent, query)
    else:
        interactive_mode(agent)


if __name__ == "__main__":
    main()
