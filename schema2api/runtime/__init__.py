"""
Schema store, placeholder synthesis and catch-all routing.
"""

from .errors import (
    InvalidIdFormat,
    InvalidSchema,
    MethodNotAllowed,
    NoSchemaLoaded,
    RouteNotFound,
    Schema2ApiError,
)
from .router import Router
from .schema_store import Property, Schema, SchemaStore
from .synthesizer import synthesize

__all__ = [
    'Schema2ApiError', 'InvalidSchema', 'NoSchemaLoaded', 'InvalidIdFormat', 'RouteNotFound', 'MethodNotAllowed',
    'Router', 'Property', 'Schema', 'SchemaStore', 'synthesize',
]
