"""Kedge generation bundle loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from kedge_schema_merger.property_injection.injection_models import InjectionEntry
from kedge_schema_merger.schema_management.schema_loader import SchemaError, validate_definition

from .runtime_settings import KedgeGeneration

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class GenerationError(Exception):
    """Raised when the Kedge definitions generator fails."""


class ConfigurationError(GenerationError):
    """Raised when the generation bundle file is invalid."""


def load_kedge_generation(bundle_path: Path | str) -> KedgeGeneration:
    """Load the pre-generated Kedge definitions and injection mapping.

    The bundle is a YAML (or JSON) mapping with a ``definitions`` object and a
    ``mapping`` list of ``{source, target}`` pairs.
    """
    path = Path(bundle_path)
    if not path.exists():
        raise ConfigurationError(f"Kedge bundle file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read file {str(path)!r}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"file {str(path)!r} is not valid UTF-8: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse Kedge bundle file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Kedge bundle root must be a mapping.")

    definitions = _parse_definitions_section(parsed.get("definitions"))
    mapping = _parse_mapping_section(parsed.get("mapping"))
    logger.debug(
        "loaded %d Kedge definitions and %d injection entries from %s",
        len(definitions),
        len(mapping),
        path,
    )
    return KedgeGeneration(definitions=definitions, mapping=mapping)


def _parse_definitions_section(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    section = _require_mapping(value, "definitions")
    definitions: dict[str, Any] = {}
    for name, definition in section.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("definitions keys must be non-empty strings.")
        try:
            validate_definition(name, definition)
        except SchemaError as exc:
            raise ConfigurationError(f"Kedge bundle {exc}") from exc
        definitions[name] = dict(definition)
    return definitions


def _parse_mapping_section(value: Any) -> tuple[InjectionEntry, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("mapping must be a list of source/target pairs.")
    entries = []
    for index, item in enumerate(value):
        entry = _require_mapping(item, f"mapping[{index}]")
        entries.append(
            InjectionEntry(
                source=_require_non_empty_string(entry.get("source"), f"mapping[{index}].source"),
                target=_require_non_empty_string(entry.get("target"), f"mapping[{index}].target"),
            )
        )
    return tuple(entries)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Kedge bundle section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
