from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from snippet_search.embedder import HashEmbedder
from snippet_search.models import Document
from snippet_search.store import DocumentStore

log = logging.getLogger("snippet_search.seed")

# (id, repo, file, text)
DEMO_DOCUMENTS = (
    ("doc-1", "algorithms", "binary_search.ts", "Binary search over a sorted array."),
    ("doc-2", "algorithms", "quick_sort.py", "def quick_sort(items): partition the list around a pivot and sort each half"),
    ("doc-3", "webapp", "server/handler.go", "Go HTTP handler that writes headers and body"),
)


def build_demo_documents(embedder: HashEmbedder) -> List[Document]:
    """
    Embed the fixed demonstration snippets.
    """
    return [
        Document(id=doc_id, repo=repo, file=file, text=text, emb=embedder.embed_text(text))
        for doc_id, repo, file, text in DEMO_DOCUMENTS
    ]


def seed_store(store_path: Path, embedder: Optional[HashEmbedder] = None) -> Dict[str, object]:
    """
    Overwrite the store with the demonstration documents.
    Seeding again replaces the file, so the count never grows.
    """
    if embedder is None:
        embedder = HashEmbedder()

    store = DocumentStore(store_path, dimension=embedder.dimension)
    written = store.save(build_demo_documents(embedder))

    summary = {"written": written, "store": str(store.path)}
    log.info("Seed finished: %s", summary)
    return summary
