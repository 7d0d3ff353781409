from __future__ import annotations

import inspect

from .types import LLMCallable


async def invoke(llm: LLMCallable, instructions: str, content: str) -> str:
    result = llm(instructions, content)
    if inspect.isawaitable(result):
        result = await result
    if hasattr(result, "__aiter__"):
        deltas: list[str] = []
        async for delta in result:
            deltas.append(delta)
        return "".join(deltas)
    return result
