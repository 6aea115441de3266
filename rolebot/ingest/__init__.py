# Document ingestion helpers.
# Exports TextChunker for building the semantic index.

from .chunker import ChunkSequence, TextChunker

__all__ = ["ChunkSequence", "TextChunker"]
