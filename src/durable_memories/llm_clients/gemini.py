from __future__ import annotations

from typing import Callable, Coroutine


def _configure(kwargs: dict):
    import google.generativeai as genai
    if "api_key" in kwargs:
        genai.configure(api_key=kwargs.pop("api_key"))
    return genai


def create_gemini_client(model: str, **kwargs) -> Callable[[str, str], str]:
    genai = _configure(kwargs)

    def call(instructions: str, content: str) -> str:
        gm = genai.GenerativeModel(model, system_instruction=instructions, **kwargs)
        return gm.generate_content(content).text

    return call


def create_gemini_async_client(model: str, **kwargs) -> Callable[[str, str], Coroutine]:
    genai = _configure(kwargs)

    async def call(instructions: str, content: str) -> str:
        gm = genai.GenerativeModel(model, system_instruction=instructions, **kwargs)
        resp = await gm.generate_content_async(content)
        return resp.text

    return call
