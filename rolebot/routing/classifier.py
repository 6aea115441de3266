from __future__ import annotations

import logging

from .labeler import QueryLabeler, normalize_label
from .prompts import ROLE_CLASSIFIER_PROMPT
from .roles import DEFAULT_ROLE, Role

logger = logging.getLogger(__name__)


class RoleClassifier:
    def __init__(self, labeler: QueryLabeler, prompt: str = ROLE_CLASSIFIER_PROMPT):
        self.labeler = labeler
        self.prompt = prompt

    def classify(self, query: str) -> Role:
        """Map query to a Role; unknown labels fall back to general_info."""
        label = normalize_label(self.labeler.label_query(self.prompt, query))
        role = Role.from_label(label)
        if role is None:
            logger.info("Unrecognized role label %r, defaulting to %s", label, DEFAULT_ROLE.value)
            return DEFAULT_ROLE
        return role
