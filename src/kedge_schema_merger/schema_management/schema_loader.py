"""OpenAPI schema document loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, NoReturn

from .schema_models import SchemaDocument

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class SchemaError(Exception):
    """Raised when an OpenAPI schema document cannot be loaded."""


def load_schema_document(schema_path: Path | str, *, label: str) -> SchemaDocument:
    """Read and parse one OpenAPI schema file.

    Args:
      schema_path: Location of the JSON schema document.
      label: Name of the input, e.g. ``"kubernetes"``.

    Returns:
      The parsed document.

    Raises:
      SchemaError: If the file is missing, unreadable, not UTF-8 or not a
        well-formed OpenAPI JSON object.
    """
    path = Path(schema_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"cannot read file {str(path)!r}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaError(f"file {str(path)!r} is not valid UTF-8: {exc}") from exc

    document = parse_schema_document(text, label=label)
    logger.debug(
        "loaded %s schema from %s with %d definitions",
        label,
        path,
        len(document.definitions),
    )
    return document


def parse_schema_document(text: str, *, label: str) -> SchemaDocument:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"error unmarshalling OpenAPI definition: {exc}") from exc

    if not isinstance(root, dict):
        raise SchemaError("OpenAPI definition root must be a JSON object.")
    definitions = root.get("definitions")
    if definitions is not None:
        if not isinstance(definitions, Mapping):
            raise SchemaError("OpenAPI 'definitions' must be a JSON object.")
        for name, definition in definitions.items():
            validate_definition(name, definition)

    return SchemaDocument(label=label, root=root)


def validate_definition(name: str, definition: Any) -> None:
    """Check the parts of a definition that merging relies on.

    Raises:
      SchemaError: If the definition is not an object, ``properties`` is not
        an object keyed by strings, or ``required`` is not a list of strings.
    """
    if not isinstance(definition, Mapping):
        raise SchemaError(f"definition {name!r} must be an object.")
    properties = definition.get("properties")
    if properties is not None:
        if not isinstance(properties, Mapping):
            raise SchemaError(f"definition {name!r}: 'properties' must be an object.")
        for property_name in properties:
            if not isinstance(property_name, str):
                raise SchemaError(
                    f"definition {name!r}: property name {property_name!r} must be a string"
                    " (quote YAML keys such as on, yes or no)."
                )
    required = definition.get("required")
    if required is not None:
        if not isinstance(required, list) or not all(isinstance(item, str) for item in required):
            raise SchemaError(f"definition {name!r}: 'required' must be a list of strings.")


def _reject_constant(constant: str) -> NoReturn:
    raise SchemaError(f"error unmarshalling OpenAPI definition: invalid JSON value {constant}")
