from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from recruitscreening.errors import StoreError
from recruitscreening.schemas import Application, ApplicationDocuments, CandidateFacts, Vacancy
from recruitscreening.store import InMemoryCollection, JsonlStore, new_id


def build_vacancy(vacancy_id: str = "vac_1") -> Vacancy:
    return Vacancy(
        id=vacancy_id,
        title="Analyst",
        description="Data team",
        requirements=[{"field": "age", "operator": ">=", "value": 21}],
        deadline="2026-12-31",
        created_at="2026-10-01T00:00:00Z",
    )


def build_application(application_id: str, vacancy_id: str = "vac_1") -> Application:
    return Application(
        id=application_id,
        vacancy_id=vacancy_id,
        documents=ApplicationDocuments(parsed=CandidateFacts(age=30)),
        status="accepted",
        created_at="2026-10-01T00:00:00Z",
    )


def test_new_id_uses_prefix_and_is_unique():
    ids = {new_id("app") for _ in range(1000)}

    assert len(ids) == 1000
    assert all(item.startswith("app_") for item in ids)


def test_in_memory_collection_is_append_only():
    collection: InMemoryCollection[Vacancy] = InMemoryCollection()
    vacancy = build_vacancy()

    assert collection.insert(vacancy) is vacancy
    with pytest.raises(StoreError):
        collection.insert(build_vacancy())

    assert collection.list() == [vacancy]
    assert collection.get("vac_1") is vacancy
    assert collection.get("vac_2") is None
    assert not hasattr(collection, "update")
    assert not hasattr(collection, "delete")


def test_in_memory_collection_filters_linearly():
    collection: InMemoryCollection[Application] = InMemoryCollection(
        [build_application("a1", "v1"), build_application("a2", "v2"), build_application("a3", "v1")]
    )

    matched = collection.list(lambda item: item.vacancy_id == "v1")

    assert [item.id for item in matched] == ["a1", "a3"]


def test_concurrent_inserts_lose_nothing():
    collection: InMemoryCollection[Application] = InMemoryCollection()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda idx: collection.insert(build_application(new_id("app"))), range(200)))

    assert len(collection) == 200
    assert len({item.id for item in collection.list()}) == 200


def test_jsonl_store_persists_across_instances(tmp_path: Path):
    store = JsonlStore(tmp_path / "data")
    vacancy = store.vacancies.insert(build_vacancy())
    store.applications.insert(build_application("app_1"))

    reopened = JsonlStore(tmp_path / "data")

    assert reopened.vacancies.get("vac_1") == vacancy
    assert [item.id for item in reopened.applications.list()] == ["app_1"]
    assert reopened.applications.list()[0].facts.age == 30
    with pytest.raises(StoreError):
        reopened.vacancies.insert(build_vacancy())


def test_jsonl_store_reports_corrupt_lines(tmp_path: Path):
    store = JsonlStore(tmp_path)
    (tmp_path / "vacancies.jsonl").write_text("{broken\n", encoding="utf-8")

    with pytest.raises(StoreError, match="line 1"):
        store.vacancies.list()
