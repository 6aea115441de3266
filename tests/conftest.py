import sys
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import pytest

# Repo root = one level above tests/
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rolebot.generate.types import Message, ModelParams  # noqa: E402


class StubEmbedder:
    """Looks vectors up by exact text; unknown text gets `default`."""

    def __init__(self, vectors: Optional[Dict[str, Sequence[float]]] = None, default: Sequence[float] = (0.0, 1.0)):
        self.vectors = dict(vectors or {})
        self.default = list(default)
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def embed(self, text: str) -> List[float]:
        with self._lock:
            self.calls.append(text)
        return list(self.vectors.get(text, self.default))


class StubLabeler:
    """Returns a fixed raw label, or whatever `fn(prompt, query)` returns."""

    def __init__(self, label: str = "valid", fn: Optional[Callable[[str, str], str]] = None):
        self.label = label
        self.fn = fn
        self.calls: List[tuple] = []

    def label_query(self, prompt: str, query: str) -> str:
        self.calls.append((prompt, query))
        return self.fn(prompt, query) if self.fn else self.label


class StubChatModel:
    def __init__(self, reply: Optional[str] = "stub answer"):
        self.model = "stub"
        self.reply = reply
        self.calls: List[tuple] = []

    def generate(self, messages: List[Message], params: ModelParams):
        self.calls.append((messages, params))
        return self.reply, {"engine": "stub"}


@pytest.fixture
def embedder():
    return StubEmbedder()


@pytest.fixture
def chat_model():
    return StubChatModel()


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
