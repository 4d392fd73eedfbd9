"""
Smoke test against a running backend.

Posts a caption-only request for every known template name (plus "random")
for each provider and prints what came back. Gemini is skipped when no
Gemini key is set.

    TEST_BASE=http://localhost:8787 TEST_TOPIC="AI startups" python smoke_api.py
"""

import asyncio
import os
import sys

import httpx

BASE = os.getenv("TEST_BASE", "http://localhost:8787")
TOPIC = os.getenv("TEST_TOPIC", "AI startups funding winter")

TEMPLATES = [
    "drake",
    "distracted-boyfriend",
    "two-buttons",
    "doge",
    "success-kid",
    "gru-plan",
    "change-my-mind",
    "leonardo-dicaprio",
    "buzz",
    "random",
]

PROVIDERS = ["groq", "gemini"]


async def check_one(client: httpx.AsyncClient, template: str, provider: str) -> bool:
    payload = {"topic": TOPIC, "template": template, "provider": provider, "mode": "caption"}
    response = await client.post(f"{BASE}/api/generate-meme", json=payload)
    try:
        data = response.json()
    except ValueError:
        data = {}

    if response.status_code != 200 or "error" in data:
        print(f"FAIL template={template} provider={provider} {data.get('error', response.reason_phrase)}")
        return False

    print(f"OK   template={data['template']} provider={provider} caption=\"{data['caption']}\"")
    return True


async def main() -> int:
    failures = 0
    async with httpx.AsyncClient(timeout=60) as client:
        for provider in PROVIDERS:
            if provider == "gemini" and not (os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")):
                print("Skipping provider gemini (no GEMINI_API_KEY or GOOGLE_API_KEY set)")
                continue
            for template in TEMPLATES:
                if not await check_one(client, template, provider):
                    failures += 1
    print("Done.")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
