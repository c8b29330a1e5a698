"""
Error kinds raised by the runtime layer.

Each carries the HTTP status it maps to; schema2api/main.py turns them into
`{"detail": ...}` JSON responses.
"""

from __future__ import annotations


class Schema2ApiError(Exception):
    status_code = 500
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidSchema(Schema2ApiError):
    status_code = 400
    default_detail = "Invalid JSON schema"

    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(f"Invalid JSON schema: {diagnostic}")


class NoSchemaLoaded(Schema2ApiError):
    status_code = 400
    default_detail = "No schema uploaded. Please POST your JSON schema to /upload"


class InvalidIdFormat(Schema2ApiError):
    status_code = 400
    default_detail = "Invalid ID format: expected integer"


class RouteNotFound(Schema2ApiError):
    status_code = 404
    default_detail = "Not Found"


class MethodNotAllowed(Schema2ApiError):
    status_code = 405
    default_detail = "Method not supported"
