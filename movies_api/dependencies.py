import json
import re
from typing import Any, Dict, Iterable, Tuple

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from movies_api.db import EntityStore

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# genre[]=a or genre[0]=a
_LIST_KEY = re.compile(r"^(?P<name>[^\[\]]+)\[\d*\]$")


def get_movie_store(request: Request) -> EntityStore:
    return request.app.state.movie_store


def get_genre_store(request: Request) -> EntityStore:
    return request.app.state.genre_store


def form_to_dict(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    Fold url-encoded pairs into a body mapping.
    Bracketed keys always produce a list; a repeated plain key becomes a
    list once it is seen a second time.
    """
    body: Dict[str, Any] = {}
    for key, value in items:
        match = _LIST_KEY.match(key)
        if match:
            body.setdefault(match.group("name"), [])
            target = body[match.group("name")]
            if isinstance(target, list):
                target.append(value)
            else:
                body[match.group("name")] = [target, value]
        elif key in body:
            current = body[key]
            body[key] = current + [value] if isinstance(current, list) else [current, value]
        else:
            body[key] = value
    return body


async def get_request_body(request: Request) -> Any:
    """Decode a JSON or url-encoded form body; any other body reads as None."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        return form_to_dict(form.multi_items())

    if "json" not in content_type:
        return None
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
        ) from e


def request_body_docs(model_name: str, example: Dict[str, Any]) -> Dict[str, Any]:
    schema = {"$ref": f"#/components/schemas/{model_name}"}
    return {
        "requestBody": {
            "content": {
                "application/json": {"schema": schema, "example": example},
                FORM_CONTENT_TYPE: {"schema": schema},
            }
        }
    }
