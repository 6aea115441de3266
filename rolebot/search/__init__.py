# Makes the folder importable as a package.
# Exports SemanticIndex and the retrieval types for convenience.

from .index import DEFAULT_THRESHOLD, DEFAULT_TOP_K, SemanticIndex
from .similarity import cosine_similarity
from .types import Chunk, IndexState, RetrievalResult, ScoredChunk

__all__ = [
    "Chunk",
    "DEFAULT_THRESHOLD",
    "DEFAULT_TOP_K",
    "IndexState",
    "RetrievalResult",
    "ScoredChunk",
    "SemanticIndex",
    "cosine_similarity",
]
