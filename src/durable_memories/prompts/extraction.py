MEMORIES_PROMPT_MARKER = "You are extracting durable memories from the user's latest messages"
NO_MEMORIES_RESPONSE = "NO_MEMORIES"

MEMORIES_PROMPT = """You are extracting durable memories from the user's latest messages.

Only capture:
- Explicit preferences or instructions the user stated about how you should work.
- Stable facts about the user's workflow that are likely to matter in later sessions.

Do NOT capture:
- Task-specific details or anything that only applies to the current request.
- Transient context (what is happening right now, today's state, one-off errors).
- Secrets, credentials, tokens, keys, or other sensitive values.

Output format:
- A bullet list, one short sentence per bullet, each starting with "- ".
- If nothing qualifies, output exactly NO_MEMORIES and nothing else.

Example:
User: "Always use tabs, not spaces for indentation"
- Prefers tabs over spaces for indentation.

User: "The weather is nice today"
NO_MEMORIES"""

MEMORIES_PROMPT_WITH_TOOLS = """You are extracting durable memories from the user's latest messages and recent tool outputs.

Only capture:
- Explicit preferences or instructions the user stated about how you should work.
- Stable facts about the user's workflow or project that are likely to matter in later sessions,
  whether the user said them or a tool output revealed them.

Do NOT capture:
- Task-specific details or anything that only applies to the current request.
- Transient context (what is happening right now, today's state, one-off errors).
- Secrets, credentials, tokens, keys, or other sensitive values.

Output format:
- A bullet list, one short sentence per bullet, each starting with "- ".
- Prefix every bullet with [user] if the fact came from a user message,
  or [tool] if it came from a tool output. Use exactly one tag per bullet.
- If nothing qualifies, output exactly NO_MEMORIES and nothing else.

Example:
User messages: "Always use tabs, not spaces for indentation"
Tool outputs: "build system is Make, not CMake"
- [user] Prefers tabs over spaces for indentation.
- [tool] Project uses Make as its build system.

User messages: "The weather is nice today"
NO_MEMORIES"""
