from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Sequence

from pydantic import TypeAdapter, ValidationError

from snippet_search.embedder import EMBEDDING_DIM
from snippet_search.errors import InvalidInput, IOFailure, StoreUnavailable
from snippet_search.models import Document

log = logging.getLogger("snippet_search.store")

_DOCUMENTS = TypeAdapter(List[Document])


class DocumentStore:
    """
    Flat JSON file holding the whole document collection.

    The file is always read and written in full: load() parses every record,
    save() replaces the file wholesale (no append, no merge).
    """

    def __init__(self, path: Path, dimension: int = EMBEDDING_DIM) -> None:
        self.path = Path(path)
        self.dimension = dimension

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> List[Document]:
        """
        Read and validate all documents.
        Raises StoreUnavailable when the file is missing, empty or malformed.
        """
        if not self.exists():
            raise StoreUnavailable(f"Store not found: {self.path} (run 'seed' first)")

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreUnavailable(f"Cannot read store {self.path}: {e}") from e

        if not raw.strip():
            raise StoreUnavailable(f"Store is empty: {self.path}")

        try:
            docs = _DOCUMENTS.validate_json(raw)
        except ValidationError as e:
            raise StoreUnavailable(
                f"Store {self.path} is not a valid document collection "
                f"({e.error_count()} validation error(s))"
            ) from e

        seen = set()
        for doc in docs:
            if len(doc.emb) != self.dimension:
                raise StoreUnavailable(
                    f"Document {doc.id!r} has embedding of length {len(doc.emb)}, expected {self.dimension}"
                )
            if doc.id in seen:
                raise StoreUnavailable(f"Duplicate document id in store: {doc.id!r}")
            seen.add(doc.id)

        log.info("Loaded %d documents from %s", len(docs), self.path)
        return docs

    def save(self, documents: Sequence[Document]) -> int:
        """
        Overwrite the store with the given documents. Returns the count written.

        Rejects collections that load() would refuse (duplicate ids, wrong
        embedding length). Writes to a temporary file in the same directory
        and renames it over the target, so readers never see a half-written
        store and a failed write leaves the previous store in place.
        """
        seen = set()
        for doc in documents:
            if doc.id in seen:
                raise InvalidInput(f"Duplicate document id: {doc.id!r}")
            if len(doc.emb) != self.dimension:
                raise InvalidInput(
                    f"Document {doc.id!r} has embedding of length {len(doc.emb)}, expected {self.dimension}"
                )
            seen.add(doc.id)

        tmp_name = None
        replaced = False
        try:
            payload = json.dumps(
                [doc.model_dump(mode="json") for doc in documents],
                ensure_ascii=False,
                indent=2,
            )
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(payload + "\n")
            os.replace(tmp_name, self.path)
            replaced = True
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeEncodeError and serialization failures
            raise IOFailure(f"Cannot write store {self.path}: {e}") from e
        finally:
            if not replaced and tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        log.info("Wrote %d documents to %s", len(documents), self.path)
        return len(documents)
