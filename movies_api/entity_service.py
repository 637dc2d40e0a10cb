"""This module maps entity requests to store calls and store outcomes to
HTTP responses. It is shared by the movie and genre routers: each
function runs exactly one request flow against an EntityStore and turns
the result into a JSONResponse. Store faults are caught here, logged and
returned as 500 with the fault text. Only the fields an entity declares
are written; anything else in a body is dropped before create or update.
movies_api.entity_service.py
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from movies_api.db import EntityStore
from movies_api.exceptions import StoreError

logger = logging.getLogger(__name__)

Validator = Callable[[Any], List[Dict[str, Any]]]


def store_fault(entity: str, action: str, e: StoreError) -> JSONResponse:
    logger.error("Failed to %s %s: %s", action, entity, e.message)
    return JSONResponse(status_code=500, content={"message": e.message})


def declared_only(body: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    return {k: v for k, v in body.items() if k in fields}


def not_found(entity: str, entity_id: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": f"cannot find any {entity} with ID {entity_id}"})


def list_entities(store: EntityStore, entity: str, query: Optional[Dict[str, Any]] = None) -> JSONResponse:
    try:
        docs = store.find(query or {})
    except StoreError as e:
        return store_fault(entity, "list", e)
    return JSONResponse(status_code=200, content=jsonable_encoder(docs))


def create_entity(store: EntityStore, entity: str, body, validate: Validator, fields: Iterable[str]) -> JSONResponse:
    errors = validate(body)
    if errors:
        return JSONResponse(status_code=400, content={"success": False, "errors": errors})

    try:
        if store.find_one(body):
            return JSONResponse(status_code=404, content={"message": f"That {entity} already exist"})
        created = store.create(declared_only(body, fields))
    except StoreError as e:
        return store_fault(entity, "create", e)

    logger.info("Created %s %s", entity, created.get("id"))
    return JSONResponse(status_code=200, content=jsonable_encoder(created))


def update_entity(store: EntityStore, entity: str, entity_id: str, body, fields: Iterable[str]) -> JSONResponse:
    body = declared_only(body, fields) if isinstance(body, dict) else {}
    try:
        # the returned document is the pre-update state, only its presence matters
        if not store.find_by_id_and_update(entity_id, body):
            return not_found(entity, entity_id)
        updated = store.find_by_id(entity_id)
    except StoreError as e:
        return store_fault(entity, "update", e)
    return JSONResponse(status_code=200, content=jsonable_encoder(updated))


def delete_entity(store: EntityStore, entity: str, entity_id: str) -> JSONResponse:
    try:
        deleted = store.find_by_id_and_delete(entity_id)
    except StoreError as e:
        return store_fault(entity, "delete", e)

    if not deleted:
        return not_found(entity, entity_id)
    logger.info("Deleted %s %s", entity, entity_id)
    return JSONResponse(status_code=200, content={"message": f"{entity} has been deleted"})
