import pytest

from rolebot.errors import MissingInput, ProviderError
from rolebot.generate import AnswerSynthesizer
from rolebot.pipeline import CLARIFICATION_MESSAGE, AskPipeline, OutcomeKind, build_pipeline
from rolebot.routing import QuestionValidator, Role, RoleClassifier
from rolebot.search import SemanticIndex
from rolebot.settings import Settings

from conftest import StubChatModel, StubEmbedder, StubLabeler

REFUND = "Our refund window is 30 days."


def _pipeline(validator_label="valid", role_label="customer_support", embedder=None, sources=(), chat=None):
    validator_labeler = StubLabeler(validator_label)
    classifier_labeler = StubLabeler(role_label)
    embedder = embedder or StubEmbedder()
    chat = chat or StubChatModel()
    pipe = AskPipeline(
        validator=QuestionValidator(validator_labeler),
        classifier=RoleClassifier(classifier_labeler),
        index=SemanticIndex(embedder, sources),
        synthesizer=AnswerSynthesizer(chat),
    )
    return pipe, validator_labeler, classifier_labeler, embedder, chat


@pytest.mark.parametrize("query", [None, "", "   ", 123, ["refunds?"]])
def test_missing_input_touches_nothing(query):
    pipe, v, c, emb, chat = _pipeline()
    with pytest.raises(MissingInput):
        pipe.ask(query)
    assert v.calls == [] and c.calls == [] and emb.calls == [] and chat.calls == []


def test_needs_more_context_asks_for_clarification(write_file):
    path = write_file("knowledge.txt", REFUND)
    pipe, v, c, emb, chat = _pipeline(validator_label="needs_more_context", sources=[path])

    outcome = pipe.ask("My order hasn't arrived.")

    assert outcome.kind is OutcomeKind.CLARIFY
    assert outcome.text == CLARIFICATION_MESSAGE
    assert len(v.calls) == 1
    assert c.calls == [] and emb.calls == [] and chat.calls == []


def test_weak_evidence_forwards_to_role(write_file):
    path = write_file("knowledge.txt", REFUND)
    emb = StubEmbedder({REFUND: [1.0, 0.0], "What are your pricing plans?": [0.0, 1.0]})
    pipe, _, _, _, chat = _pipeline(role_label="sales_agent", embedder=emb, sources=[path])

    outcome = pipe.ask("What are your pricing plans?")

    assert outcome.kind is OutcomeKind.FORWARD
    assert outcome.text == "will forward this to our sales agent"
    assert outcome.role is Role.SALES_AGENT
    assert chat.calls == []


def test_grounded_answer(write_file):
    path = write_file("knowledge.txt", REFUND)
    emb = StubEmbedder({REFUND: [1.0, 0.0], "What is your refund policy?": [0.8, 0.6]})
    chat = StubChatModel(reply="Refunds are accepted for 30 days.")
    pipe, _, _, _, _ = _pipeline(embedder=emb, sources=[path], chat=chat)

    outcome = pipe.ask("What is your refund policy?")

    assert outcome.kind is OutcomeKind.ANSWER
    assert outcome.text == "Refunds are accepted for 30 days."
    assert outcome.role is Role.CUSTOMER_SUPPORT
    assert REFUND in chat.calls[0][0][0].content


def test_unknown_role_still_answers_as_general_info(write_file):
    path = write_file("knowledge.txt", REFUND)
    pipe, *_ = _pipeline(role_label="???", sources=[path], embedder=StubEmbedder({}, default=[1.0, 0.0]))
    outcome = pipe.ask("Tell me about refunds")
    assert outcome.role is Role.GENERAL_INFO
    assert outcome.kind is OutcomeKind.ANSWER


def test_provider_errors_propagate(write_file):
    path = write_file("knowledge.txt", REFUND)

    class Broken(StubEmbedder):
        def embed(self, text):
            raise ProviderError("embedding endpoint unreachable")

    pipe, *_ = _pipeline(embedder=Broken(), sources=[path])
    with pytest.raises(ProviderError):
        pipe.ask("What is your refund policy?")


def test_build_pipeline_from_settings(tmp_path):
    cfg = Settings(
        _env_file=None,
        MODEL_BACKEND="echo",
        KNOWLEDGE_FILES=f" {tmp_path / 'a.txt'} , {tmp_path / 'b.txt'} ,",
        TOP_K=5,
        SIMILARITY_THRESHOLD=0.5,
        CHUNK_SIZE=500,
        CHUNK_OVERLAP=50,
    )
    pipe = build_pipeline(cfg)
    assert pipe.top_k == 5
    assert pipe.threshold == 0.5
    assert pipe.index.sources == [str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]
    assert pipe.index.chunker.chunk_size == 500
    assert pipe.validator.labeler.max_tokens == 10
    assert pipe.classifier.labeler.max_tokens == 50


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        build_pipeline(Settings(_env_file=None, MODEL_BACKEND="nope"))
