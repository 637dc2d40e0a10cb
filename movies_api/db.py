"""
This module handles the connection to the MongoDB database.
It defines the EntityStore interface the route handlers depend on and
its pymongo implementation over a single collection, plus helpers to
build the client and the movie and genre stores from Settings.
movies_api.db.py
"""
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Protocol, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from movies_api.config import Settings
from movies_api.exceptions import StoreError

READ_ONLY_FIELDS = ("id", "_id")


class EntityStore(Protocol):
    def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]: ...

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...

    def find_by_id(self, entity_id: str) -> Optional[Dict[str, Any]]: ...

    def create(self, doc: Dict[str, Any]) -> Dict[str, Any]: ...

    def find_by_id_and_update(self, entity_id: str, update: Dict[str, Any]) -> Optional[Dict[str, Any]]: ...

    def find_by_id_and_delete(self, entity_id: str) -> Optional[Dict[str, Any]]: ...


def writable_fields(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in doc.items() if k not in READ_ONLY_FIELDS}


def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    return doc


@contextmanager
def store_errors():
    try:
        yield
    except (PyMongoError, InvalidId) as e:
        raise StoreError(str(e)) from e


class MongoEntityStore:
    """EntityStore backed by one pymongo collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def find(self, query):
        with store_errors():
            return [serialize(doc) for doc in self.collection.find(query)]

    def find_one(self, query):
        with store_errors():
            return serialize(self.collection.find_one(query))

    def find_by_id(self, entity_id):
        with store_errors():
            return serialize(self.collection.find_one({"_id": ObjectId(entity_id)}))

    def create(self, doc):
        doc = writable_fields(doc)
        with store_errors():
            result = self.collection.insert_one(doc)
        return serialize({**doc, "_id": result.inserted_id})

    def find_by_id_and_update(self, entity_id, update):
        update = writable_fields(update)
        with store_errors():
            oid = ObjectId(entity_id)
            # an empty $set is rejected by the server
            if not update:
                return serialize(self.collection.find_one({"_id": oid}))
            before = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": update},
                return_document=ReturnDocument.BEFORE,
            )
        return serialize(before)

    def find_by_id_and_delete(self, entity_id):
        with store_errors():
            return serialize(self.collection.find_one_and_delete({"_id": ObjectId(entity_id)}))


def create_client(settings: Settings) -> MongoClient:
    return MongoClient(settings.mongo_uri)


def get_mongo_stores(client: MongoClient, settings: Settings) -> Tuple[MongoEntityStore, MongoEntityStore]:
    db = client[settings.db_name]
    return (
        MongoEntityStore(db[settings.movies_collection]),
        MongoEntityStore(db[settings.genres_collection]),
    )
