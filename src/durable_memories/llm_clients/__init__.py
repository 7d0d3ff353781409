from .openai import create_openai_client, create_openai_async_client, create_openai_streaming_client
from .anthropic import create_anthropic_client, create_anthropic_async_client
from .gemini import create_gemini_client, create_gemini_async_client
from .openrouter import create_openrouter_client, create_openrouter_async_client
from .ollama import create_ollama_client, create_ollama_async_client

__all__ = [
    "create_openai_client", "create_openai_async_client", "create_openai_streaming_client",
    "create_anthropic_client", "create_anthropic_async_client",
    "create_gemini_client", "create_gemini_async_client",
    "create_openrouter_client", "create_openrouter_async_client",
    "create_ollama_client", "create_ollama_async_client",
]
