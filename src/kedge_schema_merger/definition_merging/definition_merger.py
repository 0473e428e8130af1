"""Definition merging service."""

from __future__ import annotations

import logging

from kedge_schema_merger.schema_management.schema_models import SchemaDocument

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def merge_definitions(target: SchemaDocument, source: SchemaDocument) -> None:
    """Copy every definition of ``source`` into ``target``; source wins on collision."""
    target_definitions = target.definitions
    overwritten = 0
    for name, definition in source.definitions.items():
        if name in target_definitions:
            overwritten += 1
        target_definitions[name] = definition
    logger.debug(
        "merged %d %s definitions into %s (%d overwritten)",
        len(source.definitions),
        source.label,
        target.label,
        overwritten,
    )
