# Model clients: each exposes generate(messages, params) and embed(text).

from rolebot.settings import Settings
from .echo_dev_client import EchoDevClient


def make_clients(cfg: Settings):
    """Return (chat_client, classifier_client, embedder) for the configured backend."""
    backend = (cfg.MODEL_BACKEND or "ollama").lower()

    if backend == "ollama":
        from .ollama_client import OllamaClient

        def _ollama(model: str) -> "OllamaClient":
            return OllamaClient(
                model=model,
                embed_model=cfg.EMBED_MODEL,
                base_url=cfg.OLLAMA_BASE_URL,
                embed_base_url=cfg.embed_base_url,
                timeout=cfg.REQUEST_TIMEOUT,
            )

        chat = _ollama(cfg.CHAT_MODEL)
        return chat, _ollama(cfg.CLASSIFIER_MODEL), chat

    if backend == "openai":
        from .openai_client import OpenAIClient

        client = OpenAIClient(
            model=cfg.OPENAI_CHAT_MODEL,
            embed_model=cfg.OPENAI_EMBED_MODEL,
            api_key=cfg.OPENAI_API_KEY,
            timeout=cfg.REQUEST_TIMEOUT,
        )
        return client, client, client

    if backend == "echo":
        client = EchoDevClient()
        return client, client, client

    raise ValueError(f"Unsupported model backend: {cfg.MODEL_BACKEND}")


__all__ = ["EchoDevClient", "make_clients"]
