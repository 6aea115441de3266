# Query gating: question validation and role classification.

from .classifier import RoleClassifier
from .labeler import ChatModelLabeler, QueryLabeler, normalize_label
from .roles import DEFAULT_ROLE, Role
from .validator import QuestionValidator

__all__ = [
    "ChatModelLabeler",
    "DEFAULT_ROLE",
    "QueryLabeler",
    "QuestionValidator",
    "Role",
    "RoleClassifier",
    "normalize_label",
]
