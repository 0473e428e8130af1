"""Document assembly exports."""

from .assembly_contracts import AssemblyRequest
from .assembly_use_case import AssemblyError, assemble_document
from .document_emitter import (
    DocumentEmissionError,
    DocumentEncodingError,
    emit_document,
    render_document,
)

__all__ = [
    "AssemblyError",
    "AssemblyRequest",
    "DocumentEmissionError",
    "DocumentEncodingError",
    "assemble_document",
    "emit_document",
    "render_document",
]
