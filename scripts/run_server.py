#!/usr/bin/env python3
"""Server runner for the Exchange Rate A2A agent."""
import os
import sys
import logging
from pathlib import Path
import argparse

# Configure logging to show DEBUG messages
logging.basicConfig(
    level=logging.DEBUG if os.getenv("DEBUG", "false").lower() == "true" else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Add project root (parent of this scripts/ dir) to path so `exchange_agent` is importable
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))


def load_environment():
    """Load environment variables from .env file if it exists."""
    from dotenv import load_dotenv
    env_file = project_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"✅ Loaded environment from {env_file}")
    else:
        print(f"⚠️  No .env file found at {env_file}")
        print("   Set environment variables manually or create a .env file")


def validate_environment():
    """Validate required environment variables."""
    required_vars = {
        "OPENAI_API_KEY": "OpenAI API key for the agent's model"
    }

    missing_vars = []
    for var, description in required_vars.items():
        if not os.getenv(var):
            missing_vars.append(f"  - {var}: {description}")

    if missing_vars:
        print("❌ Missing required environment variables:")
        for var in missing_vars:
            print(var)
        print("\nSet these variables in your .env file or environment")
        return False

    print("✅ All required environment variables are set")
    return True


def main():
    """Run the A2A server."""
    parser = argparse.ArgumentParser(description="Run the Exchange Rate A2A server")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args()

    load_environment()

    if not validate_environment():
        sys.exit(1)

    # Import after environment is loaded
    from exchange_agent.server import create_app

    app = create_app()

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = args.port or int(os.getenv("PORT", "5000"))
    debug = os.getenv("DEBUG", "false").lower() == "true"

    print(f"🌐 Server will run on http://{host}:{port}")
    print(f"🔧 Debug: {'enabled' if debug else 'disabled'}")
    print("\nAvailable endpoints:")
    print("  GET  /health                                  - Health check")
    print("  GET  /.well-known/a2a.json                    - Agent cards")
    print("  GET  /a2a/agent/{agentId}/.well-known/agent.json - Agent card")
    print("  POST /a2a/agent/{agentId}                     - JSON-RPC task request")
    print("\n" + "="*50)

    try:
        app.run(
            host=host,
            port=port,
            debug=debug,
            threaded=True
        )
    except KeyboardInterrupt:
        print("\n👋 Server stopped by user")


if __name__ == "__main__":
    main()
