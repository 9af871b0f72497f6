import json
import math

import pytest

from snippet_search.embedder import EMBEDDING_DIM, HashEmbedder, embed_text
from snippet_search.errors import InvalidInput, StoreUnavailable
from snippet_search.search import semantic_search
from snippet_search.seed import DEMO_DOCUMENTS, build_demo_documents, seed_store
from snippet_search.store import DocumentStore


def test_seed_writes_three_demo_documents(store_path):
    summary = seed_store(store_path)

    assert summary == {"written": 3, "store": str(store_path)}
    docs = DocumentStore(store_path).load()
    assert [d.id for d in docs] == [d[0] for d in DEMO_DOCUMENTS]
    assert all(list(d.emb) == embed_text(d.text) for d in docs)


def test_seed_twice_keeps_exactly_three_documents(store_path):
    seed_store(store_path)
    first = DocumentStore(store_path).load()
    seed_store(store_path)
    second = DocumentStore(store_path).load()

    assert len(second) == 3
    assert second == first


def test_seed_replaces_foreign_store_content(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text(json.dumps(["garbage"]), encoding="utf-8")

    seed_store(store_path)

    assert len(DocumentStore(store_path).load()) == 3


def test_binary_search_query_ranks_binary_search_file_first(seeded_store):
    results = semantic_search("binary search implementation", store_path=seeded_store)

    assert results[0].document.file == "binary_search.ts"
    assert results[0].score == pytest.approx(2 / math.sqrt(18))
    assert [r.document.id for r in results] == ["doc-1", "doc-3", "doc-2"]


def test_query_against_missing_store_raises_store_unavailable(store_path):
    with pytest.raises(StoreUnavailable):
        semantic_search("anything", store_path=store_path)


def test_empty_query_returns_all_documents_in_store_order(seeded_store):
    results = semantic_search("", store_path=seeded_store)

    assert [r.document.id for r in results] == ["doc-1", "doc-2", "doc-3"]
    assert all(r.score == 0 for r in results)


def test_repeated_queries_are_identical(seeded_store):
    first = semantic_search("sort the list", store_path=seeded_store)
    second = semantic_search("sort the list", store_path=seeded_store)
    assert first == second


@pytest.mark.parametrize("top_k", [0, 1, 2, 3, 10])
def test_result_count_never_exceeds_min_of_k_and_collection(seeded_store, top_k):
    results = semantic_search("handler", store_path=seeded_store, top_k=top_k)
    assert len(results) == min(top_k, 3)


def test_non_text_query_raises_invalid_input(seeded_store):
    with pytest.raises(InvalidInput):
        semantic_search(123, store_path=seeded_store)


def test_store_dimension_must_match_embedder(seeded_store):
    with pytest.raises(StoreUnavailable):
        semantic_search("binary", store_path=seeded_store, embedder=HashEmbedder(dimension=EMBEDDING_DIM * 2))


def test_custom_embedder_round_trip(store_path):
    embedder = HashEmbedder(dimension=16)
    seed_store(store_path, embedder=embedder)

    results = semantic_search("binary search", store_path=store_path, embedder=embedder)

    assert len(results) == len(build_demo_documents(embedder))
    assert all(len(r.document.emb) == 16 for r in results)
