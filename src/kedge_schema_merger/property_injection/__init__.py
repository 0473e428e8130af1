"""Property injection exports."""

from .exemption_rules import REQUIRED_FIELD_EXEMPTIONS, exempt_required_fields
from .injection_engine import inject_kedge_spec
from .injection_models import InjectionEntry
from .property_augmenter import augment_properties, unique_union

__all__ = [
    "InjectionEntry",
    "REQUIRED_FIELD_EXEMPTIONS",
    "augment_properties",
    "exempt_required_fields",
    "inject_kedge_spec",
    "unique_union",
]
