from typing import Any, List

from fastapi import APIRouter, Depends

from movies_api import entity_service
from movies_api.db import EntityStore
from movies_api.dependencies import get_movie_store, get_request_body, request_body_docs
from movies_api.models import MessageResponse, Movie, ValidationErrorResponse, declared_fields
from movies_api.validation import validate_movie

ENTITY = "movie"
FIELDS = declared_fields(Movie)

MOVIE_EXAMPLE = {
    "title": "movie1",
    "description": "funny",
    "releaseDate": "2023-10-10",
    "genre": ["comedy"],
}

router = APIRouter()


@router.get(
    "",
    summary="Get a list of movies",
    response_model=List[Movie],
    responses={500: {"model": MessageResponse}},
)
def list_movies(store: EntityStore = Depends(get_movie_store)):
    return entity_service.list_entities(store, ENTITY)


@router.post(
    "",
    summary="Create a new movie if it doesn't exist",
    response_model=Movie,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": MessageResponse, "description": "Movie already exists"},
        500: {"model": MessageResponse},
    },
    openapi_extra=request_body_docs("Movie", MOVIE_EXAMPLE),
)
def create_movie(
    body: Any = Depends(get_request_body),
    store: EntityStore = Depends(get_movie_store),
):
    return entity_service.create_entity(store, ENTITY, body, validate_movie, FIELDS)


@router.put(
    "/{id}",
    summary="Update a movie by ID",
    response_model=Movie,
    responses={
        404: {"model": MessageResponse, "description": "Movie not found"},
        500: {"model": MessageResponse},
    },
    openapi_extra=request_body_docs("Movie", MOVIE_EXAMPLE),
)
def update_movie(
    id: str,
    body: Any = Depends(get_request_body),
    store: EntityStore = Depends(get_movie_store),
):
    return entity_service.update_entity(store, ENTITY, id, body, FIELDS)


@router.delete(
    "/{id}",
    summary="Delete a movie by ID",
    response_model=MessageResponse,
    responses={
        404: {"model": MessageResponse, "description": "Movie not found"},
        500: {"model": MessageResponse},
    },
)
def delete_movie(id: str, store: EntityStore = Depends(get_movie_store)):
    return entity_service.delete_entity(store, ENTITY, id)


@router.get(
    "/genre/{genreName}",
    summary="Get movies by genre",
    response_model=List[Movie],
    responses={500: {"model": MessageResponse}},
)
def list_movies_by_genre(genreName: str, store: EntityStore = Depends(get_movie_store)):
    return entity_service.list_entities(store, ENTITY, {"genre": genreName})
