from __future__ import annotations

import logging

from .labeler import QueryLabeler, normalize_label
from .prompts import QUESTION_VALIDATION_PROMPT

logger = logging.getLogger(__name__)

VALID_LABEL = "valid"
NEEDS_MORE_CONTEXT_LABEL = "needs_more_context"


class QuestionValidator:
    """Rejects under-specified queries before any retrieval work.

    Fails closed: only an exact "valid" label passes.
    """

    def __init__(self, labeler: QueryLabeler, prompt: str = QUESTION_VALIDATION_PROMPT):
        self.labeler = labeler
        self.prompt = prompt

    def is_valid(self, query: str) -> bool:
        label = normalize_label(self.labeler.label_query(self.prompt, query))
        if label not in (VALID_LABEL, NEEDS_MORE_CONTEXT_LABEL):
            logger.warning("Unrecognized validation label %r, treating query as invalid", label)
        return label == VALID_LABEL
