# =============================================================
# chunker.py
# -------------------------------------------------------------
# Split a document into overlapping, size-bounded chunks.
# Tries natural boundaries first (paragraph, line, sentence,
# word) and only hard-cuts a run of text that has none.
# Chunks are verbatim slices of the input, so consecutive
# chunks overlap on whole pieces of text.
# =============================================================

from __future__ import annotations

from collections import deque
from math import gcd
from typing import Iterator, Sequence, Tuple

DEFAULT_SEPARATORS: Tuple[str, ...] = ("\n\n", "\n", ". ", " ")

Span = Tuple[int, int]


class ChunkSequence:
    """Lazy, restartable view of the chunks of one document."""

    def __init__(self, chunker: "TextChunker", text: str):
        self._chunker = chunker
        self._text = text

    def __iter__(self) -> Iterator[str]:
        for start, end in self._chunker.spans(self._text):
            piece = self._text[start:end].strip()
            if piece:
                yield piece

    def __repr__(self) -> str:
        return f"ChunkSequence(chars={len(self._text)}, chunk_size={self._chunker.chunk_size})"


class TextChunker:
    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 100,
        separators: Sequence[str] = DEFAULT_SEPARATORS,
    ):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap must be >= 0 and < chunk_size")
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = tuple(s for s in separators if s)
        # hard-cut piece length divides both chunk_size and chunk_overlap
        self.cut_size = gcd(chunk_size, chunk_overlap)

    def split(self, text: str) -> ChunkSequence:
        if not text or not text.strip():
            return ChunkSequence(self, "")
        return ChunkSequence(self, text)

    # -------------------------
    # Offsets
    # -------------------------
    def spans(self, text: str) -> Iterator[Span]:
        """
        Yield (start, end) offsets of each chunk.
        Spans cover the whole text, never exceed chunk_size, and
        consecutive spans share at most chunk_overlap characters.
        """
        if not text.strip():
            return
        window: deque[Span] = deque()
        size = 0
        for start, end in self._pieces(text, 0, len(text), self.separators):
            length = end - start
            if window and size + length > self.chunk_size:
                yield window[0][0], window[-1][1]
                # keep a tail of whole pieces as overlap for the next chunk
                while window and (size > self.chunk_overlap or size + length > self.chunk_size):
                    s, e = window.popleft()
                    size -= e - s
            window.append((start, end))
            size += length
        if window:
            yield window[0][0], window[-1][1]

    def _pieces(self, text: str, start: int, end: int, separators: Sequence[str]) -> Iterator[Span]:
        """Contiguous pieces of text[start:end], each at most chunk_size long."""
        if end - start <= self.chunk_size:
            yield start, end
            return

        for i, sep in enumerate(separators):
            if text.find(sep, start, end) != -1:
                break
        else:
            for s in range(start, end, self.cut_size):
                yield s, min(s + self.cut_size, end)
            return

        finer = separators[i + 1:]
        pos = start
        while pos < end:
            idx = text.find(sep, pos, end)
            cut = end if idx == -1 else idx + len(sep)
            yield from self._pieces(text, pos, cut, finer)
            pos = cut
