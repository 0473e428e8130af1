"""Property injection entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InjectionEntry:
    """Augment the ``target`` Kedge definition with the ``source`` API definition."""

    source: str
    target: str
