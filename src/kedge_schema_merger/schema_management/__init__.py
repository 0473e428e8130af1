"""Schema management exports."""

from .schema_loader import (
    SchemaError,
    load_schema_document,
    parse_schema_document,
    validate_definition,
)
from .schema_models import Definitions, SchemaDocument

__all__ = [
    "Definitions",
    "SchemaDocument",
    "SchemaError",
    "load_schema_document",
    "parse_schema_document",
    "validate_definition",
]
