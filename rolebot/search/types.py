# Data models for the search layer.
# These types represent what the index holds and what a query returns.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Chunk:
    """One embedded slice of a source document. Immutable once indexed."""
    text: str
    source_file: str
    embedding: Tuple[float, ...]


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk paired with its cosine similarity to one query."""
    chunk: Chunk
    score: float

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def source_file(self) -> str:
        return self.chunk.source_file


@dataclass
class RetrievalResult:
    """Top-k scored chunks for one query; empty when evidence is too weak."""
    query: str
    chunks: List[ScoredChunk] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self) -> Iterator[ScoredChunk]:
        return iter(self.chunks)

    def __bool__(self) -> bool:
        return bool(self.chunks)


class IndexState(str, Enum):
    EMPTY = "empty"
    BUILDING = "building"
    READY = "ready"
