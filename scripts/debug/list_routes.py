#!/usr/bin/env python3
"""List registered routes and probe the A2A endpoint with the Flask test client."""

import sys
from pathlib import Path
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

# Load environment
load_dotenv()

# Import after loading env
from exchange_agent.server import create_app

# Create app
app = create_app()

# List all routes
print("All registered routes:")
print("-" * 50)
for rule in app.url_map.iter_rules():
    methods = ', '.join(rule.methods - {'OPTIONS', 'HEAD'})
    print(f"{rule.rule:50} [{methods}]")

print("\n" + "-" * 50)
print("\nProbing A2A error paths (no model calls):")

with app.test_client() as client:
    response = client.post('/a2a/agent/exchangeAgent', json={"jsonrpc": "1.0", "id": 1, "params": {}})
    print(f"invalid envelope: {response.status_code} - {response.get_json()}")

    response = client.post('/a2a/agent/missingAgent', json={"jsonrpc": "2.0", "id": 2, "params": {}})
    print(f"unknown agent:    {response.status_code} - {response.get_json()}")
