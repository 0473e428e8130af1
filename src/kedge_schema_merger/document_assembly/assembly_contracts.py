"""Document assembly entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AssemblyRequest:
    """Input contract for assembling one merged document."""

    kedge_bundle_path: str
    kubernetes_schema_path: str
    openshift_schema_path: str
