from __future__ import annotations

from typing import Callable, Coroutine


def create_anthropic_client(model: str, max_tokens: int = 1024, **kwargs) -> Callable[[str, str], str]:
    from anthropic import Anthropic
    client = Anthropic(**kwargs)

    def call(instructions: str, content: str) -> str:
        resp = client.messages.create(
            model=model, max_tokens=max_tokens, system=instructions,
            messages=[{"role": "user", "content": content}],
        )
        return "".join(block.text for block in resp.content if block.type == "text")

    return call


def create_anthropic_async_client(model: str, max_tokens: int = 1024, **kwargs) -> Callable[[str, str], Coroutine]:
    from anthropic import AsyncAnthropic
    client = AsyncAnthropic(**kwargs)

    async def call(instructions: str, content: str) -> str:
        resp = await client.messages.create(
            model=model, max_tokens=max_tokens, system=instructions,
            messages=[{"role": "user", "content": content}],
        )
        return "".join(block.text for block in resp.content if block.type == "text")

    return call
