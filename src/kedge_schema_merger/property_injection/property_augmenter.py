"""Property augmentation of one definition from another."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def unique_union(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Return names of ``first`` then unseen names of ``second``, in first-seen order."""
    merged: list[str] = []
    seen: set[str] = set()
    for name in (*first, *second):
        if name not in seen:
            seen.add(name)
            merged.append(name)
    return merged


def augment_properties(
    source: Mapping[str, Any] | None, target: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Return ``target`` extended with the properties and required names of ``source``.

    Properties already defined on the target are kept as they are; only names
    missing from the target are taken from the source. Fragments are shared
    with the source, not copied. ``None`` is treated as an empty definition.
    The input mappings are left untouched.
    """
    source = source or {}
    augmented = dict(target or {})

    source_properties = source.get("properties") or {}
    target_properties = augmented.get("properties")
    properties = dict(target_properties or {})
    for name, fragment in source_properties.items():
        if name not in properties:
            properties[name] = fragment
    if target_properties is not None or properties:
        augmented["properties"] = properties

    if "required" in augmented or "required" in source:
        augmented["required"] = unique_union(
            augmented.get("required") or (), source.get("required") or ()
        )
    return augmented
