from typing import Any, List

from fastapi import APIRouter, Depends

from movies_api import entity_service
from movies_api.db import EntityStore
from movies_api.dependencies import get_genre_store, get_request_body, request_body_docs
from movies_api.models import Genre, MessageResponse, ValidationErrorResponse, declared_fields
from movies_api.validation import validate_genre

ENTITY = "genre"
FIELDS = declared_fields(Genre)

router = APIRouter()


@router.get(
    "",
    summary="Get a list of genres",
    response_model=List[Genre],
    responses={500: {"model": MessageResponse}},
)
def list_genres(store: EntityStore = Depends(get_genre_store)):
    return entity_service.list_entities(store, ENTITY)


@router.post(
    "",
    summary="Create a new genre if it doesn't exist",
    response_model=Genre,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": MessageResponse, "description": "Genre already exists"},
        500: {"model": MessageResponse},
    },
    openapi_extra=request_body_docs("Genre", {"name": "Action"}),
)
def create_genre(
    body: Any = Depends(get_request_body),
    store: EntityStore = Depends(get_genre_store),
):
    return entity_service.create_entity(store, ENTITY, body, validate_genre, FIELDS)


@router.put(
    "/{id}",
    summary="Update a genre by ID",
    response_model=Genre,
    responses={
        404: {"model": MessageResponse, "description": "Genre not found"},
        500: {"model": MessageResponse},
    },
    openapi_extra=request_body_docs("Genre", {"name": "Drama"}),
)
def update_genre(
    id: str,
    body: Any = Depends(get_request_body),
    store: EntityStore = Depends(get_genre_store),
):
    return entity_service.update_entity(store, ENTITY, id, body, FIELDS)


@router.delete(
    "/{id}",
    summary="Delete a genre by ID",
    response_model=MessageResponse,
    responses={
        404: {"model": MessageResponse, "description": "Genre not found"},
        500: {"model": MessageResponse},
    },
)
def delete_genre(id: str, store: EntityStore = Depends(get_genre_store)):
    return entity_service.delete_entity(store, ENTITY, id)
