import json
import logging
import re
import time
from typing import Callable, List, Optional, Tuple, Union
from uuid import uuid4

from fastapi import Request
from starlette.responses import Response

LOG = logging.getLogger("schema2api.http")

EMAIL_RE = re.compile(r'([A-Za-z0-9._%+-])([A-Za-z0-9._%+-]*)(@[A-Za-z0-9.-]+\.[A-Za-z]{2,})')
PHONE_RE = re.compile(r'(\+?\d{2,3})[-\s.]?(\d{3})[-\s.]?(\d{3,4})[-\s.]?(\d{3,4})')
MAX_BODY_CHARS = 4000

Replacement = Union[str, Callable[[re.Match[str]], str]]

# email keeps its first character and domain, phone keeps country code and last group
DEFAULT_RULES: List[Tuple[re.Pattern[str], Replacement]] = [
    (EMAIL_RE, lambda m: f"{m.group(1)}***{m.group(3)}"),
    (PHONE_RE, lambda m: f"{m.group(1)}-***-***-{m.group(4)}"),
]


class Redactor:
    def __init__(self, rules: Optional[List[Tuple[str, Replacement]]] = None):
        if rules is None:
            self.rules = list(DEFAULT_RULES)
        else:
            self.rules = [(re.compile(p), repl) for p, repl in rules]

    def redact(self, s: str) -> str:
        if not s:
            return s
        for rgx, repl in self.rules:
            s = rgx.sub(repl, s)
        return s


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger("schema2api")
    root.setLevel(level.upper())
    if not root.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(_handler)


def request_logger(redactor: Optional[Redactor] = None):
    """Build an http middleware: correlation id + one JSON log line per request."""
    redactor = redactor or Redactor()

    async def observability(request: Request, call_next):
        cid = request.headers.get("x-correlation-id") or str(uuid4())
        started = time.time()

        try:
            raw = await request.body()
            body_txt = raw.decode("utf-8", errors="replace")[:MAX_BODY_CHARS]
        except Exception:
            body_txt = ""

        response: Optional[Response] = None
        try:
            response = await call_next(request)
        finally:
            dur_ms = int((time.time() - started) * 1000)
            LOG.info(json.dumps({
                "ts": time.time(),
                "cid": cid,
                "method": request.method,
                "path": request.url.path,
                "status": getattr(response, "status_code", 0),
                "dur_ms": dur_ms,
                "body": redactor.redact(body_txt),
            }))
        response.headers["x-correlation-id"] = cid
        return response

    return observability
