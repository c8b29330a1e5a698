"""
Holds the single active schema.

The schema is replaced wholesale on every upload; readers get either the old
or the new instance, never a partially built one.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .errors import InvalidSchema

LOG = logging.getLogger("schema2api.store")


class _Document(BaseModel):
    """JSON null, for the whole document or any known key, decodes to the empty value."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def null_document(cls, data):
        return {} if data is None else data

    @field_validator("*", mode="before")
    @classmethod
    def null_field(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Property(_Document):
    type: str = ""


class Schema(_Document):
    title: str = ""
    type: str = ""
    properties: Dict[str, Property] = {}
    required: List[str] = []

    @property
    def entity(self) -> str:
        """REST resource segment: lower-cased title with a trailing "s"."""
        return self.title.lower() + "s"


def parse_schema(raw: bytes) -> Schema:
    """Decode raw upload bytes, raising InvalidSchema with the parser diagnostic."""
    try:
        return Schema.model_validate_json(raw)
    except ValidationError as e:
        errs = e.errors(include_url=False)
        msg = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in errs
        )
        raise InvalidSchema(msg or str(e)) from e


class SchemaStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._schema: Optional[Schema] = None

    def upload(self, raw: bytes) -> Schema:
        schema = parse_schema(raw)
        with self._lock:
            previous = self._schema
            self._schema = schema
        if previous is not None:
            LOG.info(f"Schema '{previous.title}' replaced by '{schema.title}' ({len(schema.properties)} properties)")
        else:
            LOG.info(f"Schema '{schema.title}' loaded ({len(schema.properties)} properties)")
        return schema

    def current(self) -> Optional[Schema]:
        with self._lock:
            return self._schema

    def clear(self) -> None:
        with self._lock:
            self._schema = None
