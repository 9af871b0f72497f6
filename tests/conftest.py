import pytest

from snippet_search.seed import seed_store


@pytest.fixture()
def store_path(tmp_path):
    return tmp_path / "data" / "documents.json"


@pytest.fixture()
def seeded_store(store_path):
    seed_store(store_path)
    return store_path
