"""
An in-process EntityStore keeping documents in insertion order.
Used by the test suite and by STORE_BACKEND=memory for running the API
without a MongoDB server. Queries support exact field equality, with a
list field also matching any scalar it contains.
movies_api.memory_store.py
"""
import copy
from threading import Lock
from typing import Any, Dict, List, Optional

from bson import ObjectId

from movies_api.db import writable_fields


def matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for field, expected in query.items():
        actual = doc.get(field)
        if actual == expected:
            continue
        if isinstance(actual, list) and not isinstance(expected, list) and expected in actual:
            continue
        return False
    return True


class InMemoryEntityStore:
    def __init__(self, docs: Optional[List[Dict[str, Any]]] = None):
        self._docs: Dict[str, Dict[str, Any]] = {}
        self._lock = Lock()
        for doc in docs or []:
            self.create(doc)

    def find(self, query):
        with self._lock:
            return [copy.deepcopy(d) for d in self._docs.values() if matches(d, query)]

    def find_one(self, query):
        with self._lock:
            for doc in self._docs.values():
                if matches(doc, query):
                    return copy.deepcopy(doc)
        return None

    def find_by_id(self, entity_id):
        with self._lock:
            doc = self._docs.get(entity_id)
            return copy.deepcopy(doc) if doc is not None else None

    def create(self, doc):
        record = copy.deepcopy(writable_fields(doc))
        record["id"] = str(ObjectId())
        with self._lock:
            self._docs[record["id"]] = record
        return copy.deepcopy(record)

    def find_by_id_and_update(self, entity_id, update):
        with self._lock:
            doc = self._docs.get(entity_id)
            if doc is None:
                return None
            before = copy.deepcopy(doc)
            doc.update(copy.deepcopy(writable_fields(update)))
        return before

    def find_by_id_and_delete(self, entity_id):
        with self._lock:
            return self._docs.pop(entity_id, None)
