# Client for Ollama local inference.
# Chat goes to /api/chat (non-streaming), embeddings to /api/embeddings.
# Every call carries a timeout; transport or payload faults raise ProviderError.

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from rolebot.errors import ProviderError
from ..types import Message, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA = "http://localhost:11434"


class OllamaClient:
    def __init__(
        self,
        model: str = "mistral:latest",
        embed_model: str = "nomic-embed-text",
        base_url: str = DEFAULT_OLLAMA,
        embed_base_url: Optional[str] = None,
        timeout: float = 120.0,
    ):
        self.model = model
        self.embed_model = embed_model
        self.base_url = base_url.rstrip("/")
        self.embed_base_url = (embed_base_url or base_url).rstrip("/")
        self.timeout = timeout

    def _post(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            resp = requests.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.Timeout as e:
            raise ProviderError(f"Ollama request to {url} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise ProviderError(f"Ollama request to {url} failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Ollama returned non-JSON body from {url}") from e
        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected Ollama response shape from {url}")
        return data

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[Optional[str], Dict[str, Any]]:
        payload: Dict[str, Any] = {
            "model": self.model,
            "stream": False,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        options: Dict[str, Any] = {}
        if params.temperature is not None:
            options["temperature"] = float(params.temperature)
        if params.max_tokens is not None:
            # Ollama uses num_predict for token limit
            options["num_predict"] = int(params.max_tokens)
        if options:
            payload["options"] = options

        data = self._post(f"{self.base_url}/api/chat", payload)
        msg = data.get("message") or {}
        text = msg.get("content") if isinstance(msg, dict) else None
        return text, {"engine": "ollama", "model": self.model}

    def embed(self, text: str) -> List[float]:
        data = self._post(
            f"{self.embed_base_url}/api/embeddings",
            {"model": self.embed_model, "prompt": text},
        )
        vec = data.get("embedding")
        if not isinstance(vec, list) or not vec:
            raise ProviderError(f"Ollama returned no embedding for model {self.embed_model}")
        return [float(x) for x in vec]
