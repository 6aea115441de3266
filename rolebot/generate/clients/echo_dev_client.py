# Dummy model client for local dev and testing without API calls.
# Embeddings are a hashed bag of words: deterministic, offline, and
# good enough for texts that share vocabulary to score close together.

import hashlib
import re
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..types import Message, ModelParams

_WORD = re.compile(r"[0-9a-z]+")


class EchoDevClient:
    def __init__(self, dim: int = 64):
        self.model = "echo-dev"
        self.dim = dim

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[Optional[str], Dict[str, Any]]:
        user_inputs = [m.content for m in messages if m.role == "user"]
        text = f"[ECHO RESPONSE]\n{user_inputs[-1] if user_inputs else '(no user input)'}"
        meta = {"engine": "echo", "model": "echo-dev", "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta

    def embed(self, text: str) -> List[float]:
        vec = np.zeros(self.dim, dtype=np.float64)
        for word in _WORD.findall(text.lower()):
            digest = hashlib.sha1(word.encode("utf-8")).digest()
            vec[int.from_bytes(digest[:4], "big") % self.dim] += 1.0
        return vec.tolist()
