from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from snippet_search.embedder import HashEmbedder
from snippet_search.errors import InvalidInput
from snippet_search.matcher import DEFAULT_TOP_K, rank_documents
from snippet_search.models import ScoredResult
from snippet_search.store import DocumentStore

log = logging.getLogger("snippet_search.search")


def semantic_search(
    query: str,
    store_path: Path,
    top_k: int = DEFAULT_TOP_K,
    embedder: Optional[HashEmbedder] = None,
) -> List[ScoredResult]:
    """
    Rank stored documents against the query, best first.
    An empty query embeds to the zero vector, so every document scores 0
    and comes back in store order.
    """
    if not isinstance(query, str):
        raise InvalidInput(f"Query must be text, got {type(query).__name__}")

    if embedder is None:
        embedder = HashEmbedder()

    docs = DocumentStore(store_path, dimension=embedder.dimension).load()
    query_vec = embedder.embed_text(query)

    results = rank_documents(docs, query_vec, top_k=top_k)

    log.info("Search returned %d results", len(results))
    return results
