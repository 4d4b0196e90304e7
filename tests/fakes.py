"""In-memory stand-in for the few motor collection calls the services make."""

from dataclasses import dataclass
from typing import Any

from bson import ObjectId
from pymongo.errors import DuplicateKeyError


def _matches(doc: dict, query: dict) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


@dataclass
class InsertResult:
    inserted_id: ObjectId


@dataclass
class DeleteResult:
    deleted_count: int


class FakeCursor:
    def __init__(self, docs: list[dict]):
        self._docs = docs

    def sort(self, key: str, direction: int) -> "FakeCursor":
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    async def to_list(self, length: int) -> list[dict]:
        return [dict(d) for d in self._docs[:length]]


class FakeCollection:
    def __init__(self, unique: tuple[str, ...] = ("user_id", "plant_id")):
        self.docs: list[dict] = []
        self.unique = unique
        self.indexes: list[Any] = []

    def find(self, query: dict) -> FakeCursor:
        return FakeCursor([d for d in self.docs if _matches(d, query)])

    async def find_one(self, query: dict):
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, doc: dict) -> InsertResult:
        key = {k: doc.get(k) for k in self.unique}
        if any(_matches(d, key) for d in self.docs):
            raise DuplicateKeyError("duplicate key")
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return InsertResult(inserted_id=doc["_id"])

    async def delete_one(self, query: dict) -> DeleteResult:
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return DeleteResult(deleted_count=1)
        return DeleteResult(deleted_count=0)

    async def create_index(self, keys, **kwargs) -> str:
        self.indexes.append((keys, kwargs))
        return kwargs.get("name", "idx")
