"""Required-field exemptions applied after property injection."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

# Kedge modifier definitions embed a pod template that Kedge fills in itself.
REQUIRED_FIELD_EXEMPTIONS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "io.kedge.DeploymentSpecMod": frozenset({"template"}),
        "io.kedge.DeploymentConfigSpecMod": frozenset({"template"}),
        "io.kedge.JobSpecMod": frozenset({"template"}),
    }
)


def exempt_required_fields(
    name: str,
    definition: Mapping[str, Any],
    exemptions: Mapping[str, frozenset[str]] = REQUIRED_FIELD_EXEMPTIONS,
) -> dict[str, Any]:
    """Drop the exempted names of ``name`` from the definition's required list."""
    relaxed = dict(definition)
    exempted = exemptions.get(name)
    if not exempted or "required" not in relaxed:
        return relaxed
    relaxed["required"] = [
        field_name for field_name in relaxed["required"] or () if field_name not in exempted
    ]
    return relaxed
