from __future__ import annotations

import re

from .errors import MemoryOutputError
from .prompts import NO_MEMORIES_RESPONSE, PromptVariant
from .types import ExtractionResult, MemoryCandidate, SourceTag

MAX_MEMORY_CHARS = 200

_BULLET_PREFIXES = ("- ", "* ")
_TAG_RE = re.compile(r"^\[(user|tool)\](?:\s+|$)", re.IGNORECASE)
# the output contract allows only these exact prefixes
_STRICT_TAG_RE = re.compile(r"^\[(user|tool)\] (?=\S)")
_SENTENCE_BREAK_RE = re.compile(r"[.!?]\s+[A-Z]")
_ABBREVIATION_RE = re.compile(r"\b(?:e\.g|i\.e|etc|vs|approx|incl|Mr|Mrs|Ms|Dr)\.", re.IGNORECASE)


def _is_sentinel(text: str) -> bool:
    return text.strip().upper() == NO_MEMORIES_RESPONSE


def _strip_bullet(line: str) -> str | None:
    for prefix in _BULLET_PREFIXES:
        if line.startswith(prefix):
            return line[len(prefix):].strip()
    return None


def split_source_tag(entry: str) -> tuple[SourceTag | None, str]:
    match = _TAG_RE.match(entry)
    if not match:
        return None, entry
    return match.group(1).lower(), entry[match.end():].strip()  # type: ignore[return-value]


def memory_key(entry: str) -> str:
    """Case-insensitive identity of a memory, ignoring any source tag."""
    return split_source_tag(entry.strip())[1].lower()


def dedupe(candidates: list[MemoryCandidate]) -> list[MemoryCandidate]:
    seen: set[str] = set()
    deduped: list[MemoryCandidate] = []
    for candidate in candidates:
        key = memory_key(candidate.text)
        if key in seen:
            continue
        seen.add(key)
        deduped.append(candidate)
    return deduped


def _is_single_sentence(body: str) -> bool:
    return not _SENTENCE_BREAK_RE.search(_ABBREVIATION_RE.sub("", body))


def parse_memory_candidates(
    text: str, variant: PromptVariant | str = PromptVariant.USER
) -> list[MemoryCandidate]:
    """Best-effort parse of a model reply into memory candidates.

    Anything that is not a bullet is kept as a plain line. Source tags are
    split off only for the tagged variant; elsewhere they stay in the text.
    """
    trimmed = text.strip()
    if not trimmed or _is_sentinel(trimmed):
        return []

    tagged = PromptVariant(variant).tagged
    candidates: list[MemoryCandidate] = []
    for raw in trimmed.splitlines():
        line = raw.strip()
        if not line or _is_sentinel(line):
            continue
        entry = _strip_bullet(line)
        if entry is None:
            entry = line
        source, body = split_source_tag(entry) if tagged else (None, entry)
        if not body:
            continue
        candidates.append(MemoryCandidate(text=body, source=source))

    return dedupe(candidates)


def _split_strict_tag(line: str, entry: str) -> tuple[SourceTag, str]:
    match = _STRICT_TAG_RE.match(entry)
    if match is None:
        loose = _TAG_RE.match(entry)
        if loose is None:
            raise MemoryOutputError("bullet is missing a [user] or [tool] tag", line)
        if not entry[loose.end():].strip():
            raise MemoryOutputError("empty bullet", line)
        raise MemoryOutputError("tag must be exactly '[user] ' or '[tool] '", line)
    body = entry[match.end():]
    if _TAG_RE.match(body):
        raise MemoryOutputError("bullet carries more than one tag", line)
    return match.group(1), body  # type: ignore[return-value]


def validate_extraction_output(
    text: str, variant: PromptVariant | str = PromptVariant.USER
) -> ExtractionResult:
    """Check a reply against the output contract and return what it carries.

    Every line is a "- " bullet; in the tagged variant a line may also start
    directly with its "[user] " or "[tool] " tag. A bullet counts as one
    sentence unless ".", "!" or "?" is followed by whitespace and a capital
    letter; common abbreviations such as "e.g." are ignored for that check.

    Raises MemoryOutputError on the first violating line.
    """
    variant = PromptVariant(variant)
    trimmed = text.strip()
    if not trimmed:
        raise MemoryOutputError("empty reply")
    if trimmed == NO_MEMORIES_RESPONSE:
        return ExtractionResult(sentinel=True)

    candidates: list[MemoryCandidate] = []
    for raw in trimmed.splitlines():
        line = raw.strip()
        if not line:
            continue
        if _is_sentinel(line):
            raise MemoryOutputError(f"{NO_MEMORIES_RESPONSE} mixed with bullets", line)

        if line.startswith("- "):
            entry = line[2:].strip()
        elif variant.tagged and _TAG_RE.match(line):
            entry = line
        else:
            raise MemoryOutputError("expected a '- ' bullet", line)

        source: SourceTag | None = None
        if variant.tagged:
            source, body = _split_strict_tag(line, entry)
        elif _TAG_RE.match(entry):
            raise MemoryOutputError("source tags are not allowed in this variant", line)
        else:
            body = entry

        if not body:
            raise MemoryOutputError("empty bullet", line)
        if len(body) > MAX_MEMORY_CHARS:
            raise MemoryOutputError(f"bullet longer than {MAX_MEMORY_CHARS} characters", line)
        if not _is_single_sentence(body):
            raise MemoryOutputError("bullet holds more than one sentence", line)
        candidates.append(MemoryCandidate(text=body, source=source))

    return ExtractionResult(candidates=dedupe(candidates))


def parse_memories(text: str) -> list[str]:
    """Entries of a memories file. Bullets win; plain lines are the fallback."""
    bullets: list[str] = []
    lines: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        entry = _strip_bullet(line)
        if entry is not None:
            bullets.append(entry)
        else:
            lines.append(line)
    return bullets if bullets else lines
