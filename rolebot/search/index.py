# In-memory semantic index over a handful of local text files.
#
# Lifecycle: EMPTY -> BUILDING -> READY. The first caller of ensure_ready()
# (or search()) builds the index under a lock; concurrent callers block until
# the build finishes instead of racing to append duplicate chunks. Once READY
# the index is never refreshed: edits to the source files are not picked up
# until the process restarts.

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from rolebot.errors import DimensionMismatchError
from rolebot.generate.types import EmbeddingProvider
from rolebot.ingest.chunker import TextChunker
from .similarity import cosine_scores
from .types import Chunk, IndexState, RetrievalResult, ScoredChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3
DEFAULT_THRESHOLD = 0.3


class SemanticIndex:
    def __init__(
        self,
        embedder: EmbeddingProvider,
        sources: Iterable[Union[str, Path]],
        chunker: Optional[TextChunker] = None,
    ):
        self.embedder = embedder
        self.sources: List[Union[str, Path]] = list(sources)
        self.chunker = chunker or TextChunker()

        self._lock = threading.Lock()
        self._state = IndexState.EMPTY
        self._chunks: Tuple[Chunk, ...] = ()
        self._matrix: Optional[np.ndarray] = None  # (N, D) stacked embeddings

    # -------------------------
    # Introspection
    # -------------------------
    @property
    def state(self) -> IndexState:
        return self._state

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return self._chunks

    def __len__(self) -> int:
        return len(self._chunks)

    # -------------------------
    # Build
    # -------------------------
    def ensure_ready(self) -> "SemanticIndex":
        """Build the index once. Later calls are no-ops, even if the files changed."""
        if self._state is IndexState.READY:
            return self
        with self._lock:
            if self._state is IndexState.READY:
                return self
            self._state = IndexState.BUILDING
            try:
                chunks = list(self._embed_sources())
            except Exception:
                self._state = IndexState.EMPTY
                raise
            self._chunks = tuple(chunks)
            self._matrix = np.array([c.embedding for c in chunks], dtype=np.float64) if chunks else None
            self._state = IndexState.READY
            logger.info("Semantic index ready: %d chunks from %d source(s)", len(chunks), len(self.sources))
        return self

    build = ensure_ready

    def _read_sources(self) -> Iterator[Tuple[str, str]]:
        for src in self.sources:
            path = Path(src)
            if not path.is_file():
                logger.warning("Knowledge file %s not found, skipping", src)
                continue
            text = path.read_text(encoding="utf-8").strip()
            if not text:
                logger.warning("Knowledge file %s is empty, skipping", src)
                continue
            yield str(src), text

    def _embed_sources(self) -> Iterator[Chunk]:
        dim: Optional[int] = None
        for source_file, text in self._read_sources():
            n = 0
            for piece in self.chunker.split(text):
                vec = tuple(float(x) for x in self.embedder.embed(piece))
                if dim is None:
                    dim = len(vec)
                elif len(vec) != dim:
                    raise DimensionMismatchError(dim, len(vec))
                n += 1
                yield Chunk(text=piece, source_file=source_file, embedding=vec)
            logger.debug("Indexed %d chunks from %s", n, source_file)

    # -------------------------
    # Query
    # -------------------------
    def score_all(self, query_vec: Sequence[float]) -> List[ScoredChunk]:
        """Every chunk scored against query_vec, best first; ties keep insertion order."""
        if self._matrix is None:
            return []
        scores = cosine_scores(query_vec, self._matrix)
        order = np.argsort(-scores, kind="stable")
        return [ScoredChunk(chunk=self._chunks[i], score=float(scores[i])) for i in order]

    def search(
        self,
        query: str,
        top_k: int = DEFAULT_TOP_K,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> RetrievalResult:
        """
        Return the top_k chunks for query, or an empty result when the single
        best score is below threshold. Only the best score gates the result;
        lower-ranked members may fall under the threshold.
        """
        self.ensure_ready()
        if not self._chunks or top_k <= 0:
            return RetrievalResult(query=query)

        query_vec = self.embedder.embed(query)
        top = self.score_all(query_vec)[:top_k]

        logger.info(
            "Top %d results for query %r: %s",
            top_k, query, [(c.source_file, round(c.score, 3)) for c in top],
        )

        if top[0].score < threshold:
            logger.info("Best score %.3f below threshold %.2f, no grounding", top[0].score, threshold)
            return RetrievalResult(query=query)
        return RetrievalResult(query=query, chunks=top)
