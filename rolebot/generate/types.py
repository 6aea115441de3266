# Simple, typed dataclasses and collaborator interfaces shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Tuple


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class ChatModel(Protocol):
    """Anything that turns a list of messages into free text.

    Returns (text, meta); text is None or "" when the model produced nothing.
    Network or model faults raise ProviderError.
    """

    model: str

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[Optional[str], Dict[str, Any]]:
        ...


class EmbeddingProvider(Protocol):
    """Maps text to a fixed-length vector; deterministic for identical input."""

    def embed(self, text: str) -> List[float]:
        ...
