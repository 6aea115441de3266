# Client for the OpenAI Chat Completions and Embeddings APIs.
# Same interface as OllamaClient.

import os
from typing import Any, Dict, List, Optional, Tuple

from openai import OpenAI, OpenAIError

from rolebot.errors import ProviderError
from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(
        self,
        model: str = "gpt-4o-mini",
        embed_model: str = "text-embedding-3-small",
        api_key: Optional[str] = None,
        timeout: float = 120.0,
    ):
        self.model = model
        self.embed_model = embed_model
        self.client = OpenAI(api_key=api_key or os.getenv("OPENAI_API_KEY"), timeout=timeout, max_retries=0)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[Optional[str], Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        kwargs: Dict[str, Any] = {"model": self.model, "messages": formatted}
        if params.temperature is not None:
            kwargs["temperature"] = params.temperature
        if params.max_tokens is not None:
            kwargs["max_tokens"] = params.max_tokens
        try:
            resp = self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            raise ProviderError(f"OpenAI chat completion failed: {e}") from e
        if not resp.choices:
            return None, {"engine": "openai", "model": self.model}
        text = resp.choices[0].message.content
        return text, {"engine": "openai", "model": self.model}

    def embed(self, text: str) -> List[float]:
        try:
            resp = self.client.embeddings.create(model=self.embed_model, input=text)
        except OpenAIError as e:
            raise ProviderError(f"OpenAI embedding failed: {e}") from e
        if not resp.data:
            raise ProviderError(f"OpenAI returned no embedding for model {self.embed_model}")
        return list(resp.data[0].embedding)
