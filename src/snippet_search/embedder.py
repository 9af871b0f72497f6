from __future__ import annotations

import logging
import math
import re
from typing import List

from snippet_search.errors import InvalidInput

log = logging.getLogger("snippet_search.embedder")

EMBEDDING_DIM = 64

_SPLIT_RE = re.compile(r"\W+")


def tokenize(text: str) -> List[str]:
    """
    Lowercase text and split on runs of non-word characters.
    Empty tokens are dropped.
    """
    return [t for t in _SPLIT_RE.split(text.lower()) if t]


def bucket_index(token: str, dimension: int = EMBEDDING_DIM) -> int:
    """
    Map a token to a bucket with the rolling hash h = (h * 31 + code) mod D.
    Collisions are expected; the recurrence must stay as is so demo output
    is reproducible.
    """
    h = 0
    for ch in token:
        h = (h * 31 + ord(ch)) % dimension
    return h


def embed_text(text: str, dimension: int = EMBEDDING_DIM) -> List[float]:
    """
    Deterministic bag-of-buckets embedding, L2-normalized.
    Text with no tokens yields the all-zero vector.
    """
    if not isinstance(text, str):
        raise InvalidInput(f"Cannot embed non-text input of type {type(text).__name__}")
    if dimension < 1:
        raise InvalidInput(f"Embedding dimension must be positive, got {dimension}")

    vec = [0.0] * dimension
    tokens = tokenize(text)
    for token in tokens:
        vec[bucket_index(token, dimension)] += 1.0

    norm = math.sqrt(sum(x * x for x in vec)) or 1.0
    log.debug("Embedded %d tokens (%d chars)", len(tokens), len(text))
    return [x / norm for x in vec]


class HashEmbedder:
    """
    Embedder object passed through the seed and query operations.
    """

    def __init__(self, dimension: int = EMBEDDING_DIM) -> None:
        if dimension < 1:
            raise InvalidInput(f"Embedding dimension must be positive, got {dimension}")
        self.dimension = dimension

    def embed_text(self, text: str) -> List[float]:
        return embed_text(text, self.dimension)
