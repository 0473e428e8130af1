"""Document assembly use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from kedge_schema_merger.configuration import KedgeGeneration, load_kedge_generation
from kedge_schema_merger.definition_merging import merge_definitions
from kedge_schema_merger.property_injection import inject_kedge_spec
from kedge_schema_merger.schema_management import (
    SchemaDocument,
    SchemaError,
    load_schema_document,
)

from .assembly_contracts import AssemblyRequest

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

GenerationLoader = Callable[[str], KedgeGeneration]


class AssemblyError(Exception):
    """Raised when an input schema cannot be loaded during assembly."""


def assemble_document(
    request: AssemblyRequest,
    *,
    generation_loader: GenerationLoader | None = None,
) -> SchemaDocument:
    """Merge Kubernetes, OpenShift and injected Kedge definitions into one document.

    Generator failures propagate unchanged. Schema loading failures are raised
    as ``AssemblyError`` prefixed with the name of the failing input.
    """
    resolved_generation_loader = generation_loader or load_kedge_generation
    generation = resolved_generation_loader(request.kedge_bundle_path)

    kubernetes = _load_labelled_schema(request.kubernetes_schema_path, "kubernetes")
    openshift = _load_labelled_schema(request.openshift_schema_path, "openshift")

    merge_definitions(kubernetes, openshift)
    injected = inject_kedge_spec(kubernetes.definitions, generation.definitions, generation.mapping)
    merge_definitions(kubernetes, SchemaDocument(label="kedge", root={"definitions": injected}))
    logger.debug("assembled document with %d definitions", len(kubernetes.definitions))
    return kubernetes


def _load_labelled_schema(schema_path: str, label: str) -> SchemaDocument:
    try:
        return load_schema_document(schema_path, label=label)
    except SchemaError as exc:
        raise AssemblyError(f"{label}: {exc}") from exc
