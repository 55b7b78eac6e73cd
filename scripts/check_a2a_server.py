#!/usr/bin/env python3
"""Smoke checks against a running Exchange Rate A2A server."""

import requests
import json
import sys
import os

# Server URL - assume running locally on port 5000
SERVER_URL = os.getenv("A2A_SERVER_URL", "http://localhost:5000")
AGENT_ID = os.getenv("A2A_AGENT_ID", "exchangeAgent")

QUERIES = [
    "What is the exchange rate for Japan to NGN?",
    "Show me USD to Euro rate for Germany",
    "How much is 100 USD in British Pounds?",
    "China exchange rate",
]


def check_discovery():
    """Check the A2A discovery endpoint."""
    print("\n=== Checking A2A Discovery ===")

    try:
        response = requests.get(f"{SERVER_URL}/.well-known/a2a.json")
        response.raise_for_status()

        agents = response.json().get("agents", [])
        print(f"✅ Discovery returned {len(agents)} agent(s)")
        for card in agents:
            print(f"   - {card.get('name')}: {card.get('url')}")
            for skill in card.get("skills", []):
                print(f"      skill: {skill['id']}")

        return True

    except requests.exceptions.RequestException as e:
        print(f"❌ Discovery check failed: {e}")
        return False


def check_invalid_envelope():
    """A JSON-RPC 1.0 envelope must be rejected with -32600."""
    print("\n=== Checking Invalid Envelope ===")

    try:
        response = requests.post(
            f"{SERVER_URL}/a2a/agent/{AGENT_ID}",
            json={"jsonrpc": "1.0", "id": 1, "params": {}}
        )
        error = response.json().get("error", {})
        if response.status_code == 400 and error.get("code") == -32600:
            print("✅ Invalid envelope rejected")
            return True
        print(f"❌ Expected 400/-32600 but got {response.status_code}/{error.get('code')}")
        return False

    except requests.exceptions.RequestException as e:
        print(f"❌ Invalid envelope check failed: {e}")
        return False


def check_unknown_agent():
    """Requests to an unknown agent must return 404 with -32602."""
    print("\n=== Checking Unknown Agent ===")

    try:
        response = requests.post(
            f"{SERVER_URL}/a2a/agent/noSuchAgent",
            json={"jsonrpc": "2.0", "id": 2, "params": {}}
        )
        error = response.json().get("error", {})
        if response.status_code == 404 and error.get("code") == -32602:
            print(f"✅ Unknown agent rejected: {error.get('message')}")
            return True
        print(f"❌ Expected 404/-32602 but got {response.status_code}/{error.get('code')}")
        return False

    except requests.exceptions.RequestException as e:
        print(f"❌ Unknown agent check failed: {e}")
        return False


def check_query(query: str, request_id: int):
    """Send one natural-language query and print the task result."""
    print(f"\n=== Query: {query!r} ===")

    payload = {
        "jsonrpc": "2.0",
        "id": request_id,
        "method": "message/send",
        "params": {
            "message": {
                "kind": "message",
                "role": "user",
                "parts": [{"kind": "text", "text": query}],
                "messageId": f"check-{request_id}"
            }
        }
    }

    try:
        response = requests.post(f"{SERVER_URL}/a2a/agent/{AGENT_ID}", json=payload)
        response.raise_for_status()

        body = response.json()
        if "error" in body:
            print(f"❌ Request returned error: {body['error']}")
            return False

        task = body["result"]
        print(f"✅ Task {task['id']} state: {task['status']['state']}")
        for artifact in task["artifacts"]:
            for part in artifact["parts"]:
                if part["kind"] == "text":
                    print(f"   {artifact['name']}: {part['text']}")
                else:
                    print(f"   {artifact['name']}: {json.dumps(part['data'])}")
        return True

    except requests.exceptions.RequestException as e:
        print(f"❌ Query failed: {e}")
        if hasattr(e, 'response') and e.response is not None:
            print(f"   Response: {e.response.text}")
        return False


def main():
    """Run all A2A checks."""
    print("=" * 50)
    print("Exchange Rate A2A Server Checks")
    print(f"Checking server at: {SERVER_URL}")
    print("=" * 50)

    try:
        response = requests.get(f"{SERVER_URL}/health")
        response.raise_for_status()
        print(f"✅ Server is running at {SERVER_URL}")
    except requests.exceptions.RequestException:
        print(f"❌ Server is not running at {SERVER_URL}")
        print("   Please start the server with: python scripts/run_server.py")
        sys.exit(1)

    results = [
        check_discovery(),
        check_invalid_envelope(),
        check_unknown_agent(),
    ]
    for index, query in enumerate(QUERIES, start=10):
        results.append(check_query(query, index))

    print("\n" + "=" * 50)
    passed = sum(results)
    total = len(results)
    print(f"Passed: {passed}/{total}")

    if passed != total:
        print(f"⚠️  {total - passed} check(s) failed")
        sys.exit(1)
    print("✅ All checks passed!")


if __name__ == "__main__":
    main()
