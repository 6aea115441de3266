import pytest

from rolebot.routing import (
    ChatModelLabeler,
    QuestionValidator,
    Role,
    RoleClassifier,
    normalize_label,
)
from rolebot.routing.prompts import QUESTION_VALIDATION_PROMPT, ROLE_CLASSIFIER_PROMPT

from conftest import StubChatModel, StubLabeler


# -------------------------
# Roles
# -------------------------
def test_role_set_is_closed():
    assert {r.value for r in Role} == {
        "customer_support",
        "sales_agent",
        "marketing_agent",
        "technical_expert",
        "general_info",
    }


@pytest.mark.parametrize(
    "role,label",
    [
        (Role.CUSTOMER_SUPPORT, "customer support"),
        (Role.SALES_AGENT, "sales agent"),
        (Role.MARKETING_AGENT, "marketing agent"),
        (Role.TECHNICAL_EXPERT, "technical expert"),
        (Role.GENERAL_INFO, "general info"),
    ],
)
def test_role_labels(role, label):
    assert role.label == label
    assert role.forward_message == f"will forward this to our {label}"
    assert role.forward_message in role.instruction


def test_from_label():
    assert Role.from_label("sales_agent") is Role.SALES_AGENT
    assert Role.from_label("sales agent") is None


# -------------------------
# Validator
# -------------------------
@pytest.mark.parametrize("raw", ["valid", " Valid\n", "VALID"])
def test_validator_accepts_valid(raw):
    assert QuestionValidator(StubLabeler(raw)).is_valid("How do I reset my password?")


@pytest.mark.parametrize("raw", ["needs_more_context", "", "valid.", "Answer: valid", "invalid", "I think it is valid"])
def test_validator_fails_closed(raw):
    assert not QuestionValidator(StubLabeler(raw)).is_valid("tx blocked")


def test_validator_uses_validation_prompt():
    labeler = StubLabeler("valid")
    QuestionValidator(labeler).is_valid("error?")
    assert labeler.calls == [(QUESTION_VALIDATION_PROMPT, "error?")]


# -------------------------
# Classifier
# -------------------------
def test_classifier_normalizes_output():
    assert RoleClassifier(StubLabeler(" Technical_Expert \n")).classify("How do I use the API?") is Role.TECHNICAL_EXPERT


@pytest.mark.parametrize("role", list(Role))
def test_classifier_recognizes_every_role(role):
    assert RoleClassifier(StubLabeler(role.value)).classify("q") is role


@pytest.mark.parametrize("raw", ["", "support", "Role: sales_agent", "sales agent"])
def test_classifier_defaults_to_general_info(raw):
    assert RoleClassifier(StubLabeler(raw)).classify("What's the capital of Japan?") is Role.GENERAL_INFO


def test_classifier_uses_classifier_prompt():
    labeler = StubLabeler("sales_agent")
    RoleClassifier(labeler).classify("What are your pricing plans?")
    assert labeler.calls == [(ROLE_CLASSIFIER_PROMPT, "What are your pricing plans?")]


# -------------------------
# Labeler
# -------------------------
def test_normalize_label():
    assert normalize_label("  Needs_More_Context\n") == "needs_more_context"
    assert normalize_label(None) == ""


def test_chat_model_labeler_fills_prompt_and_pins_params():
    model = StubChatModel(reply="customer_support\n")
    labeler = ChatModelLabeler(model, max_tokens=50)

    raw = labeler.label_query(ROLE_CLASSIFIER_PROMPT, "My order hasn't arrived {today}.")

    assert raw == "customer_support\n"
    messages, params = model.calls[0]
    assert len(messages) == 1
    assert messages[0].role == "user"
    assert messages[0].content.endswith("User: My order hasn't arrived {today}.\nRole:")
    assert params.temperature == 0.0
    assert params.max_tokens == 50


def test_chat_model_labeler_empty_reply():
    assert ChatModelLabeler(StubChatModel(reply=None)).label_query(QUESTION_VALIDATION_PROMPT, "q") == ""
