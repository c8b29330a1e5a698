from typing import Any, Dict

from .schema_store import Schema
from .type_maps import placeholder_for


def synthesize(schema: Schema) -> Dict[str, Any]:
    """Fresh placeholder object for every declared property. `required` is not consulted."""
    return {name: placeholder_for(prop.type) for name, prop in schema.properties.items()}
