from __future__ import annotations

from typing import Callable, Coroutine


def _messages(instructions: str, content: str) -> list[dict]:
    return [
        {"role": "system", "content": instructions},
        {"role": "user", "content": content},
    ]


def create_openai_client(model: str, **kwargs) -> Callable[[str, str], str]:
    from openai import OpenAI
    client = OpenAI(**kwargs)

    def call(instructions: str, content: str) -> str:
        resp = client.chat.completions.create(model=model, messages=_messages(instructions, content))
        return resp.choices[0].message.content or ""

    return call


def create_openai_async_client(model: str, **kwargs) -> Callable[[str, str], Coroutine]:
    from openai import AsyncOpenAI
    client = AsyncOpenAI(**kwargs)

    async def call(instructions: str, content: str) -> str:
        resp = await client.chat.completions.create(model=model, messages=_messages(instructions, content))
        return resp.choices[0].message.content or ""

    return call


def create_openai_streaming_client(model: str, **kwargs) -> Callable:
    """Yields text deltas as they arrive; ``invoke`` joins them."""
    from openai import AsyncOpenAI
    client = AsyncOpenAI(**kwargs)

    async def call(instructions: str, content: str):
        stream = await client.chat.completions.create(
            model=model, messages=_messages(instructions, content), stream=True
        )
        async for chunk in stream:
            if chunk.choices and chunk.choices[0].delta.content:
                yield chunk.choices[0].delta.content

    return call
