"""Client-style smoke test for document contract validation.

- Uses stdlib-only HTTP client in tools/ci/http_client.py
- Posts a document missing one required part and breaking another part's
  word limit; the API must report both violations in one response.

Env vars:
- DOCCONTRACTS_API_BASE_URL
- DOCCONTRACTS_API_KEY (optional)

Exit codes:
- 0: both violation kinds came back
- 1: error
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[2]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from tools.ci.http_client import post_json


SMOKE_PAYLOAD = {
    "document": {
        "parts": [
            {"name": "Introduction", "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit."},
            {
                "name": "Body",
                "content": "Sollicitudin tempor id eu nisl nunc mi. Ut ornare lectus sit amet est placerat.",
            },
        ]
    },
    "contract": {
        "requirements": [
            {"part_name": "Introduction", "constraint": {"type": "size_limit", "max": 20}},
            {"part_name": "Body", "constraint": {"type": "size_limit", "max": 10}},
            {"part_name": "Conclusion", "constraint": {"type": "size_limit", "max": 20}},
        ]
    },
    "api_version": "1.0",
}


def check_response(resp: dict) -> list[str]:
    """Return a list of problems with a smoke response (empty means pass)."""
    problems = []
    if str(resp.get("status") or "") != "ok":
        problems.append("status != ok")
    if not resp.get("trace_id"):
        problems.append("missing trace_id")
    if resp.get("valid") is not False:
        problems.append("document should be invalid")
    kinds = sorted(v.get("kind") for v in resp.get("violations") or [])
    if kinds != ["CONSTRAINT_VIOLATION", "PART_MISSING"]:
        problems.append(f"unexpected violation kinds: {kinds}")
    return problems


def main() -> int:
    resp = post_json("/api/documents/validate", SMOKE_PAYLOAD)

    print(json.dumps({"status": resp.get("status"), "trace_id": resp.get("trace_id"), "summary": resp.get("summary")}, indent=2))

    problems = check_response(resp)
    if problems:
        print(f"ERROR: {problems}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
