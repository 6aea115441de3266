from __future__ import annotations

from typing import Sequence

import numpy as np

from rolebot.errors import DimensionMismatchError


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    dot(a, b) / (|a| * |b|).
    Raises DimensionMismatchError on unequal lengths; a zero vector scores 0.0.
    """
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    # sqrt of the product keeps sim(a, a) exactly 1.0
    denom = float(np.sqrt(np.dot(va, va) * np.dot(vb, vb)))
    if denom == 0.0:
        return 0.0
    return float(np.clip(np.dot(va, vb) / denom, -1.0, 1.0))


def cosine_scores(query: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    """Cosine similarity of one query vector against every row of an (N, D) matrix."""
    q = np.asarray(query, dtype=np.float64)
    if matrix.ndim != 2 or q.ndim != 1 or q.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError(q.shape[-1], matrix.shape[-1])
    denom = np.sqrt(np.einsum("ij,ij->i", matrix, matrix) * np.dot(q, q))
    dots = matrix @ q
    scores = np.divide(dots, denom, out=np.zeros_like(dots), where=denom > 0)
    return np.clip(scores, -1.0, 1.0)
