"""Serialization of the merged schema document."""

from __future__ import annotations

import json
from typing import TextIO

from kedge_schema_merger.schema_management.schema_models import SchemaDocument


class DocumentEncodingError(Exception):
    """Raised when the merged document holds a value JSON cannot encode."""


class DocumentEmissionError(Exception):
    """Raised when the rendered document cannot be written out."""


def render_document(document: SchemaDocument) -> str:
    """Render the document root as two-space indented JSON."""
    try:
        return json.dumps(document.root, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise DocumentEncodingError(f"cannot encode {document.label} document: {exc}") from exc


def emit_document(document: SchemaDocument, stream: TextIO) -> None:
    """Write the rendered document and a trailing newline to ``stream``."""
    text = render_document(document)
    try:
        stream.write(text)
        stream.write("\n")
        stream.flush()
    except OSError as exc:
        raise DocumentEmissionError(f"cannot write merged document: {exc}") from exc
