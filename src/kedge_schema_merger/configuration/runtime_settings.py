"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kedge_schema_merger.property_injection.injection_models import InjectionEntry


@dataclass(frozen=True)
class KedgeGeneration:
    """Output of the Kedge definitions generator."""

    definitions: dict[str, Any] = field(default_factory=dict)
    mapping: tuple[InjectionEntry, ...] = ()
