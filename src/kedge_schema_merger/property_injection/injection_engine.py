"""Injection of upstream API properties into Kedge definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .exemption_rules import REQUIRED_FIELD_EXEMPTIONS, exempt_required_fields
from .injection_models import InjectionEntry
from .property_augmenter import augment_properties

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def inject_kedge_spec(
    api_definitions: Mapping[str, Any],
    target_definitions: Mapping[str, Any],
    mapping: Sequence[InjectionEntry],
    *,
    exemptions: Mapping[str, frozenset[str]] = REQUIRED_FIELD_EXEMPTIONS,
) -> dict[str, Any]:
    """Apply every mapping entry in order and return the augmented definitions.

    Unknown source or target names are treated as empty definitions. A target
    listed more than once is augmented again on top of the earlier result.
    ``target_definitions`` itself is not modified.
    """
    injected = dict(target_definitions)
    for entry in mapping:
        source = api_definitions.get(entry.source)
        if source is None:
            logger.debug("source definition %s not found, using empty definition", entry.source)
        augmented = augment_properties(source, injected.get(entry.target))
        injected[entry.target] = exempt_required_fields(entry.target, augmented, exemptions)
        logger.debug("injected %s into %s", entry.source, entry.target)
    return injected
