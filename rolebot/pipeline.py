# ============================================================
# Ask pipeline
# ------------------------------------------------------------
# validate -> classify -> retrieve -> synthesize
# Every query ends in exactly one of: a clarification request,
# a forwarding message, a synthesized answer, or an error.
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from rolebot.errors import MissingInput
from rolebot.generate.clients import make_clients
from rolebot.generate.generator import AnswerSynthesizer
from rolebot.ingest.chunker import TextChunker
from rolebot.routing import ChatModelLabeler, QuestionValidator, Role, RoleClassifier
from rolebot.search.index import DEFAULT_THRESHOLD, DEFAULT_TOP_K, SemanticIndex
from rolebot.settings import Settings

logger = logging.getLogger(__name__)

CLARIFICATION_MESSAGE = "Could you provide more details about your question?"

VALIDATOR_MAX_TOKENS = 10
CLASSIFIER_MAX_TOKENS = 50


class OutcomeKind(str, Enum):
    CLARIFY = "clarify"
    FORWARD = "forward"
    ANSWER = "answer"


@dataclass
class AskOutcome:
    kind: OutcomeKind
    text: str
    role: Optional[Role] = None


class AskPipeline:
    def __init__(
        self,
        validator: QuestionValidator,
        classifier: RoleClassifier,
        index: SemanticIndex,
        synthesizer: AnswerSynthesizer,
        top_k: int = DEFAULT_TOP_K,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        self.validator = validator
        self.classifier = classifier
        self.index = index
        self.synthesizer = synthesizer
        self.top_k = top_k
        self.threshold = threshold

    def ask(self, query: Any) -> AskOutcome:
        if not isinstance(query, str) or not query.strip():
            raise MissingInput("Missing query.")

        if not self.validator.is_valid(query):
            logger.info("Query needs more context: %r", query)
            return AskOutcome(kind=OutcomeKind.CLARIFY, text=CLARIFICATION_MESSAGE)

        role = self.classifier.classify(query)
        retrieval = self.index.search(query, top_k=self.top_k, threshold=self.threshold)
        logger.info("Query routed to %s with %d grounding chunk(s)", role.value, len(retrieval))

        text = self.synthesizer.synthesize(query, role, retrieval)
        kind = OutcomeKind.ANSWER if retrieval else OutcomeKind.FORWARD
        return AskOutcome(kind=kind, text=text, role=role)


def build_pipeline(cfg: Settings) -> AskPipeline:
    """Wire clients, gating, index and synthesizer from settings."""
    chat_client, classifier_client, embedder = make_clients(cfg)
    index = SemanticIndex(
        embedder=embedder,
        sources=cfg.knowledge_files,
        chunker=TextChunker(chunk_size=cfg.CHUNK_SIZE, chunk_overlap=cfg.CHUNK_OVERLAP),
    )
    return AskPipeline(
        validator=QuestionValidator(ChatModelLabeler(classifier_client, max_tokens=VALIDATOR_MAX_TOKENS)),
        classifier=RoleClassifier(ChatModelLabeler(classifier_client, max_tokens=CLASSIFIER_MAX_TOKENS)),
        index=index,
        synthesizer=AnswerSynthesizer(
            chat_client,
            context_chars=cfg.CONTEXT_CHARS,
            temperature=cfg.CHAT_TEMPERATURE,
        ),
        top_k=cfg.TOP_K,
        threshold=cfg.SIMILARITY_THRESHOLD,
    )
