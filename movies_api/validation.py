"""
This module holds the request validation rules for the writable entities.
Each rule checks one clause on one body field; every rule is evaluated,
so a single field can report more than one failure.
movies_api.validation.py
"""
from datetime import datetime
from typing import Any, Callable, Dict, List, NamedTuple

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m-%d-%Y",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%d/%m/%Y",
    "%Y-%m-%dT%H:%M:%S",
)

_MISSING = object()


class Rule(NamedTuple):
    field: str
    check: Callable[[Any], bool]
    message: str


def exists(value) -> bool:
    return value is not _MISSING and value is not None


def is_date(value) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    for fmt in DATE_FORMATS:
        try:
            datetime.strptime(value, fmt)
            return True
        except ValueError:
            continue
    return False


def is_array(value) -> bool:
    return isinstance(value, list)


MOVIE_RULES = [
    Rule("title", exists, "Title is required"),
    Rule("description", exists, "Description is required"),
    Rule("releaseDate", exists, "Release date is required"),
    Rule("releaseDate", is_date, "Should be valid date"),
    Rule("genre", exists, "Genre name is required"),
    Rule("genre", is_array, "Should be array"),
]

GENRE_RULES = [
    Rule("name", exists, "Name is required"),
]


def run_rules(rules: List[Rule], body) -> List[Dict[str, Any]]:
    if not isinstance(body, dict):
        body = {}

    failures = []
    for rule in rules:
        value = body.get(rule.field, _MISSING)
        if rule.check(value):
            continue
        failure = {"type": "field", "msg": rule.message, "path": rule.field, "location": "body"}
        if value is not _MISSING:
            failure["value"] = value
        failures.append(failure)
    return failures


def validate_movie(body) -> List[Dict[str, Any]]:
    return run_rules(MOVIE_RULES, body)


def validate_genre(body) -> List[Dict[str, Any]]:
    return run_rules(GENRE_RULES, body)
