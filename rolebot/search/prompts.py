# Prompt fragments for grounded answering.
# The generator combines persona + rules + retrieved context into the system message.

from __future__ import annotations
from typing import Iterable

from rolebot.routing.roles import Role
from .types import ScoredChunk

DEFAULT_CONTEXT_CHARS = 600


def build_rules(role: Role) -> str:
    return f"""\
RULES:
- ONLY answer using the Reference Context.
- If answer not found in context reply exactly: "{role.forward_message}".
"""


def format_context(chunks: Iterable[ScoredChunk], max_chars: int = DEFAULT_CONTEXT_CHARS) -> str:
    """One block per chunk, prefixed by its source file and cut to max_chars."""
    return "\n\n".join(f"From {c.source_file}:\n{c.text[:max_chars]}" for c in chunks)


def build_system_prompt(role: Role, chunks: Iterable[ScoredChunk], max_chars: int = DEFAULT_CONTEXT_CHARS) -> str:
    return f"""{role.instruction}

{build_rules(role)}
Reference Context:
{format_context(chunks, max_chars)}
"""
