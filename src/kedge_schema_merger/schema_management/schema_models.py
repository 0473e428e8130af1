"""Schema management entities."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any

Definitions = MutableMapping[str, Any]


@dataclass(frozen=True)
class SchemaDocument:
    """One parsed OpenAPI v2 document and the input it came from."""

    label: str
    root: dict[str, Any] = field(default_factory=dict)

    @property
    def definitions(self) -> Definitions:
        """Named definitions of the document, created empty when absent."""
        definitions = self.root.get("definitions")
        if definitions is None:
            definitions = {}
            self.root["definitions"] = definitions
        return definitions
