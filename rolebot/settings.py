# rolebot/settings.py
import os
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Rolebot")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    PORT: int = Field(default=3001)

    # model backend: ollama | openai | echo
    MODEL_BACKEND: str = Field(default="ollama")
    OLLAMA_BASE_URL: str = Field(default="http://localhost:11434")
    EMBED_BASE_URL: str | None = None  # falls back to OLLAMA_BASE_URL
    CLASSIFIER_MODEL: str = Field(default="mistral:latest")
    CHAT_MODEL: str = Field(default="mistral:latest")
    EMBED_MODEL: str = Field(default="nomic-embed-text")

    OPENAI_API_KEY: str | None = None
    OPENAI_CHAT_MODEL: str = Field(default="gpt-4o-mini")
    OPENAI_EMBED_MODEL: str = Field(default="text-embedding-3-small")

    # knowledge base
    KNOWLEDGE_FILES: str = Field(default="knowledge.txt")
    CHUNK_SIZE: int = Field(default=1000)
    CHUNK_OVERLAP: int = Field(default=100)

    # retrieval + generation
    TOP_K: int = Field(default=3)
    SIMILARITY_THRESHOLD: float = Field(default=0.3)
    CONTEXT_CHARS: int = Field(default=600)
    CHAT_TEMPERATURE: float = Field(default=1.0)
    REQUEST_TIMEOUT: float = Field(default=120.0)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def knowledge_files(self) -> List[str]:
        return [p.strip() for p in self.KNOWLEDGE_FILES.split(",") if p.strip()]

    @property
    def embed_base_url(self) -> str:
        return self.EMBED_BASE_URL or self.OLLAMA_BASE_URL


settings = Settings()
