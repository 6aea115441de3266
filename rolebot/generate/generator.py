# AnswerSynthesizer turns retrieved evidence + a persona into the final answer.
# - no evidence: canned forwarding message, the model is never called
# - evidence: persona + rules + context as the system message, raw query as the user message

from __future__ import annotations

import logging

from rolebot.routing.roles import Role
from rolebot.search.prompts import DEFAULT_CONTEXT_CHARS, build_system_prompt
from rolebot.search.types import RetrievalResult
from .types import ChatModel, Message, ModelParams

logger = logging.getLogger(__name__)

NO_CONTENT_PLACEHOLDER = "No content returned."


class AnswerSynthesizer:
    def __init__(
        self,
        model_client: ChatModel,
        context_chars: int = DEFAULT_CONTEXT_CHARS,
        temperature: float = 1.0,
        max_tokens: int | None = None,
    ):
        self.model_client = model_client
        self.context_chars = context_chars
        self.params = ModelParams(temperature=temperature, max_tokens=max_tokens)

    def compose_messages(self, query: str, role: Role, retrieval: RetrievalResult) -> list[Message]:
        system = build_system_prompt(role, retrieval.chunks, self.context_chars)
        return [Message(role="system", content=system), Message(role="user", content=query)]

    def synthesize(self, query: str, role: Role, retrieval: RetrievalResult) -> str:
        if not retrieval:
            return role.forward_message

        messages = self.compose_messages(query, role, retrieval)
        text, meta = self.model_client.generate(messages, self.params)
        logger.debug("Chat model meta: %s", meta)
        if not text:
            logger.warning("Chat model returned no content for role %s", role.value)
            return NO_CONTENT_PLACEHOLDER
        return text
