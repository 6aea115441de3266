# Narrow seam between the gating logic and whatever model produces labels.
# Tests swap in a stub QueryLabeler; production uses ChatModelLabeler.

from __future__ import annotations

import logging
from typing import Protocol

from rolebot.generate.types import ChatModel, Message, ModelParams
from .prompts import fill_prompt

logger = logging.getLogger(__name__)


class QueryLabeler(Protocol):
    def label_query(self, prompt: str, query: str) -> str:
        """Return the model's raw label text for query under the few-shot prompt."""
        ...


def normalize_label(raw: str | None) -> str:
    return (raw or "").strip().lower()


class ChatModelLabeler:
    """Labels a query with a chat model at temperature 0 and a small token budget."""

    def __init__(self, model: ChatModel, max_tokens: int = 50):
        self.model = model
        self.max_tokens = max_tokens

    def label_query(self, prompt: str, query: str) -> str:
        messages = [Message(role="user", content=fill_prompt(prompt, query))]
        text, _ = self.model.generate(messages, ModelParams(temperature=0.0, max_tokens=self.max_tokens))
        logger.debug("Raw label %r for query %r", text, query)
        return text or ""
