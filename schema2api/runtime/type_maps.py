from typing import Any, Callable, Dict

PLACEHOLDER_STRING = "example"

# declared JSON Schema type -> placeholder factory; anything else synthesizes as None
PLACEHOLDERS: Dict[str, Callable[[], Any]] = {
    "string": lambda: PLACEHOLDER_STRING,
    "integer": lambda: 1,
    "number": lambda: 0.0,
    "boolean": lambda: False,
}


def placeholder_for(type_tag: str) -> Any:
    factory = PLACEHOLDERS.get(type_tag)
    return factory() if factory else None
