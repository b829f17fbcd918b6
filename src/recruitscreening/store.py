"""Append-only storage for vacancies and applications."""

from __future__ import annotations

import json
import threading
import uuid
from pathlib import Path
from typing import Callable, Generic, Iterable, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .errors import StoreError
from .schemas import Application, Vacancy

EntityT = TypeVar("EntityT", bound=BaseModel)

Predicate = Callable[[EntityT], bool]


def new_id(prefix: str = "id") -> str:
    """Return a collision-resistant identifier such as ``app_3f2a...``."""
    return f"{prefix}_{uuid.uuid4().hex}"


@runtime_checkable
class Collection(Protocol[EntityT]):
    """Append-only entity collection contract."""

    def insert(self, entity: EntityT) -> EntityT:
        """Append ``entity``; raise StoreError when its id is already taken."""

    def list(self, predicate: Predicate | None = None) -> list[EntityT]:
        """Return entities in insertion order, optionally filtered."""

    def get(self, entity_id: str) -> EntityT | None:
        """Return the entity with ``entity_id`` or None."""


class InMemoryCollection(Generic[EntityT]):
    """Thread-safe list-backed collection."""

    def __init__(self, entities: Iterable[EntityT] = ()) -> None:
        self._lock = threading.Lock()
        self._entities: list[EntityT] = []
        self._index: dict[str, EntityT] = {}
        for entity in entities:
            self.insert(entity)

    def insert(self, entity: EntityT) -> EntityT:
        entity_id = getattr(entity, "id")
        with self._lock:
            if entity_id in self._index:
                raise StoreError(f"Duplicate id: {entity_id!r}")
            self._entities.append(entity)
            self._index[entity_id] = entity
        return entity

    def list(self, predicate: Predicate | None = None) -> list[EntityT]:
        with self._lock:
            snapshot = list(self._entities)
        if predicate is None:
            return snapshot
        return [entity for entity in snapshot if predicate(entity)]

    def get(self, entity_id: str) -> EntityT | None:
        with self._lock:
            return self._index.get(entity_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)


class JsonlCollection(Generic[EntityT]):
    """Collection persisted as one JSON document per line."""

    def __init__(self, path: Path, model: type[EntityT]) -> None:
        self._path = Path(path)
        self._model = model
        self._lock = threading.Lock()
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def insert(self, entity: EntityT) -> EntityT:
        entity_id = getattr(entity, "id")
        line = entity.model_dump_json()
        with self._lock:
            if any(existing.id == entity_id for existing in self._read()):
                raise StoreError(f"Duplicate id: {entity_id!r}")
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(line)
                handle.write("\n")
        return entity

    def list(self, predicate: Predicate | None = None) -> list[EntityT]:
        with self._lock:
            entities = self._read()
        if predicate is None:
            return entities
        return [entity for entity in entities if predicate(entity)]

    def get(self, entity_id: str) -> EntityT | None:
        for entity in self.list():
            if entity.id == entity_id:
                return entity
        return None

    def __len__(self) -> int:
        return len(self.list())

    def _read(self) -> list[EntityT]:
        if not self._path.exists():
            return []
        entities: list[EntityT] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    entities.append(self._model.model_validate(json.loads(raw)))
                except (json.JSONDecodeError, PydanticValidationError) as exc:
                    raise StoreError(f"{self._path.name} line {idx}: unreadable record ({exc})") from exc
        return entities


class Store:
    """Vacancy and application collections owned together."""

    def __init__(
        self,
        *,
        vacancies: Collection[Vacancy],
        applications: Collection[Application],
    ) -> None:
        self.vacancies = vacancies
        self.applications = applications


class InMemoryStore(Store):
    def __init__(self) -> None:
        super().__init__(
            vacancies=InMemoryCollection(),
            applications=InMemoryCollection(),
        )


class JsonlStore(Store):
    """Store writing ``vacancies.jsonl`` and ``applications.jsonl`` under a directory."""

    def __init__(self, directory: str | Path) -> None:
        directory = Path(directory)
        super().__init__(
            vacancies=JsonlCollection(directory / "vacancies.jsonl", Vacancy),
            applications=JsonlCollection(directory / "applications.jsonl", Application),
        )
        self.directory = directory


__all__ = [
    "Collection",
    "InMemoryCollection",
    "JsonlCollection",
    "Store",
    "InMemoryStore",
    "JsonlStore",
    "new_id",
]
