from __future__ import annotations


def _head(data: bytes, limit: int) -> str:
    return data[:limit].decode("utf-8", errors="ignore")


def _tail(data: bytes, limit: int) -> str:
    if limit <= 0:
        return ""
    return data[-limit:].decode("utf-8", errors="ignore")


def _marker(removed: int) -> str:
    return f"\n…{removed} bytes truncated…\n"


def truncate_text(text: str, max_bytes: int) -> str:
    """Fit text into max_bytes of UTF-8, keeping both ends around a marker.

    The marker reports the exact number of bytes left out.
    """
    data = text.encode("utf-8")
    if len(data) <= max_bytes:
        return text

    removed = len(data) - max_bytes
    while True:
        marker = _marker(removed)
        budget = max_bytes - len(marker.encode("utf-8"))
        if budget <= 0:
            return _head(data, max_bytes)

        head = _head(data, budget // 2)
        tail = _tail(data, budget - budget // 2)
        kept = len(head.encode("utf-8")) + len(tail.encode("utf-8"))
        # a longer count shrinks the budget, so this only ever grows
        if len(data) - kept == removed:
            return f"{head}{marker}{tail}"
        removed = len(data) - kept
