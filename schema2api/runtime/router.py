"""
Catch-all request router.

Maps (method, path) onto one of five route shapes for the active schema's
entity and builds the response payload:

  GET    /{entity}          -> three placeholder objects, ids 1..3
  GET    /{entity}/{id}     -> one placeholder object carrying the requested id
  POST   /{entity}          -> one placeholder object with id 1
  PUT    /{entity}/{id}     -> same as GET single
  DELETE /{entity}/{id}     -> fixed acknowledgement

Routes are evaluated in order; the first match wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .errors import InvalidIdFormat, MethodNotAllowed, NoSchemaLoaded, RouteNotFound
from .schema_store import Schema, SchemaStore
from .synthesizer import synthesize

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
LIST_SIZE = 3
DELETED = {"message": "Deleted successfully"}

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def split_path(path: str) -> List[str]:
    return path.strip("/").split("/")


# --------------------------------------------------------------------------------------
# ID resolution
# --------------------------------------------------------------------------------------

def expects_integer_id(schema: Schema) -> bool:
    prop = schema.properties.get("id")
    return prop is not None and prop.type == "integer"


def parse_int_id(segment: str) -> int:
    if not _INT_RE.match(segment):
        raise InvalidIdFormat()
    value = int(segment)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidIdFormat()
    return value


def string_id_field(schema: Schema) -> str:
    """`id` when declared as a string, else the lexicographically first string property, else `id`."""
    props = schema.properties
    if "id" in props and props["id"].type == "string":
        return "id"
    names = sorted(name for name, prop in props.items() if prop.type == "string")
    return names[0] if names else "id"


def resolve_id(schema: Schema, segment: str) -> Tuple[str, Any]:
    """Return (field, value) the requested id should be written to."""
    if expects_integer_id(schema):
        return "id", parse_int_id(segment)
    return string_id_field(schema), segment


# --------------------------------------------------------------------------------------
# Route handlers
# --------------------------------------------------------------------------------------

def list_entities(schema: Schema, segments: Sequence[str]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for i in range(1, LIST_SIZE + 1):
        obj = synthesize(schema)
        obj["id"] = i
        out.append(obj)
    return out


def get_entity(schema: Schema, segments: Sequence[str]) -> Dict[str, Any]:
    field, value = resolve_id(schema, segments[1])
    obj = synthesize(schema)
    obj[field] = value
    return obj


def create_entity(schema: Schema, segments: Sequence[str]) -> Dict[str, Any]:
    obj = synthesize(schema)
    obj["id"] = 1
    return obj


def delete_entity(schema: Schema, segments: Sequence[str]) -> Dict[str, str]:
    resolve_id(schema, segments[1])
    return dict(DELETED)


@dataclass(frozen=True)
class Route:
    name: str
    method: str
    arity: int
    handler: Callable[[Schema, Sequence[str]], Any]

    def matches(self, method: str, segments: Sequence[str], entity: str) -> bool:
        return method == self.method and len(segments) == self.arity and segments[0] == entity


ROUTES: Tuple[Route, ...] = (
    Route("list", "GET", 1, list_entities),
    Route("get", "GET", 2, get_entity),
    Route("create", "POST", 1, create_entity),
    Route("update", "PUT", 2, get_entity),
    Route("delete", "DELETE", 2, delete_entity),
)


class Router:
    def __init__(self, store: SchemaStore, routes: Optional[Sequence[Route]] = None):
        self.store = store
        self.routes = tuple(routes) if routes is not None else ROUTES

    def match(self, method: str, segments: Sequence[str], entity: str) -> Optional[Route]:
        for route in self.routes:
            if route.matches(method, segments, entity):
                return route
        return None

    def dispatch(self, method: str, path: str) -> Any:
        schema = self.store.current()
        if schema is None:
            raise NoSchemaLoaded()
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise MethodNotAllowed()
        segments = split_path(path)
        route = self.match(method, segments, schema.entity)
        if route is None:
            raise RouteNotFound()
        return route.handler(schema, segments)
