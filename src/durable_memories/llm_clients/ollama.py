from __future__ import annotations

from typing import Callable, Coroutine

OLLAMA_BASE_URL = "http://localhost:11434/api/chat"


def _build_payload(model: str, instructions: str, content: str) -> dict:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": instructions},
            {"role": "user", "content": content},
        ],
        "stream": False,
    }


def create_ollama_client(model: str, base_url: str = OLLAMA_BASE_URL) -> Callable[[str, str], str]:
    import httpx

    def call(instructions: str, content: str) -> str:
        resp = httpx.post(base_url, json=_build_payload(model, instructions, content), timeout=300)
        resp.raise_for_status()
        return resp.json()["message"]["content"]

    return call


def create_ollama_async_client(model: str, base_url: str = OLLAMA_BASE_URL) -> Callable[[str, str], Coroutine]:
    import httpx

    async def call(instructions: str, content: str) -> str:
        async with httpx.AsyncClient() as client:
            resp = await client.post(base_url, json=_build_payload(model, instructions, content), timeout=300)
            resp.raise_for_status()
            return resp.json()["message"]["content"]

    return call
