from __future__ import annotations

import logging
import math
from itertools import zip_longest
from typing import List, Sequence

from snippet_search.errors import InvalidInput
from snippet_search.models import Document, ScoredResult

log = logging.getLogger("snippet_search.matcher")

DEFAULT_TOP_K = 5


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Inner product. A component missing from the shorter vector counts as zero.
    """
    return sum(x * y for x, y in zip_longest(a, b, fillvalue=0.0))


def _norm(v: Sequence[float]) -> float:
    return math.sqrt(sum(x * x for x in v))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between a and b; 0.0 if either is the zero vector.
    Equal to the plain dot product for unit vectors.
    """
    denom = _norm(a) * _norm(b)
    if denom == 0:
        return 0.0
    return dot(a, b) / denom


def rank_documents(
    documents: Sequence[Document],
    query_vec: Sequence[float],
    top_k: int = DEFAULT_TOP_K,
) -> List[ScoredResult]:
    """
    Score every document against the query and return the best top_k,
    highest score first. Ties keep collection order (sorted() is stable).
    """
    if top_k < 0:
        raise InvalidInput(f"top_k must not be negative, got {top_k}")

    scored = [ScoredResult(document=doc, score=cosine_similarity(doc.emb, query_vec)) for doc in documents]
    ranked = sorted(scored, key=lambda r: r.score, reverse=True)

    log.debug("Ranked %d documents, keeping %d", len(ranked), min(top_k, len(ranked)))
    return ranked[:top_k]
