# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import NO_CONTENT_PLACEHOLDER, AnswerSynthesizer
from .types import ChatModel, EmbeddingProvider, Message, ModelParams
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "AnswerSynthesizer",
    "ChatModel",
    "EchoDevClient",
    "EmbeddingProvider",
    "Message",
    "ModelParams",
    "NO_CONTENT_PLACEHOLDER",
]
