"""
Pydantic records describing the movie and genre documents and the
JSON envelopes returned by the API. Handlers send plain dicts; these
models feed the generated OpenAPI documentation.
movies_api.models.py
"""
from pydantic import BaseModel, Field
from typing import Any, List, Optional


class Movie(BaseModel):
    id: Optional[str] = None
    title: str
    description: str
    releaseDate: str = Field(examples=["2023-10-10"])
    genre: List[str]


class Genre(BaseModel):
    id: Optional[str] = None
    name: str


class FieldFailure(BaseModel):
    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    success: bool = False
    errors: List[FieldFailure]


class MessageResponse(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str


def declared_fields(model) -> List[str]:
    return [name for name in model.model_fields if name != "id"]
