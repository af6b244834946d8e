#!/usr/bin/env python3
"""
Lightweight console client for the Prompt Library tools API.

Usage:
    python console_client.py <tool_name> [params_json] [request_id]
    python console_client.py get_categories
    python console_client.py search_prompts '{"keyword": "hooks"}'
"""

import json
import os
import sys
import uuid

import requests

# Prompt Library API base URL
API_URL = os.getenv("PROMPT_LIBRARY_URL", "http://localhost:8000")


def call_tool(tool_name: str, params: dict | None = None, request_id: str | None = None) -> int:
    """Invoke a tool and print its result record. Returns a process exit code."""

    headers = {
        "Content-Type": "application/json",
        "X-Request-ID": request_id or f"req_{int(uuid.uuid4().int % 1000000000)}",
    }

    print(f"\n{'='*80}")
    print(f"TOOL: {tool_name}")
    print(f"REQUEST ID: {headers['X-Request-ID']}")
    print(f"{'='*80}\n")

    try:
        response = requests.post(
            f"{API_URL}/v1/tools/{tool_name}",
            headers=headers,
            json=params or {},
            timeout=10,
        )
    except requests.exceptions.RequestException as e:
        print(f"\n❌ Request failed: {e}", file=sys.stderr)
        return 1

    try:
        payload = response.json()
    except ValueError as e:
        print(f"\n❌ JSON Parse Error: {e}", file=sys.stderr)
        return 1

    if "error" in payload:
        print(f"❌ {payload['error']}: {payload['message']}", file=sys.stderr)
        return 1

    # get_prompt and combine_prompts carry markdown worth printing as-is
    if "combined_prompt" in payload:
        print(payload["combined_prompt"])
    elif "content" in payload:
        print(payload["content"])
    else:
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python console_client.py <tool_name> [params_json] [request_id]")
        print("\nExamples:")
        print("  python console_client.py get_categories")
        print('  python console_client.py get_prompt \'{"category": "react", "name": "component-creation"}\'')
        print('  python console_client.py combine_prompts \'{"categories": ["react", "common"]}\'')
        sys.exit(1)

    tool = sys.argv[1]
    try:
        tool_params = json.loads(sys.argv[2]) if len(sys.argv) > 2 else None
    except json.JSONDecodeError as e:
        print(f"ERROR: params must be a JSON object: {e}", file=sys.stderr)
        sys.exit(1)
    trace_id = sys.argv[3] if len(sys.argv) > 3 else None

    sys.exit(call_tool(tool, tool_params, trace_id))
