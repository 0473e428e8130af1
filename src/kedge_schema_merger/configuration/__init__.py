"""Configuration domain exports."""

from .loader import ConfigurationError, GenerationError, load_kedge_generation
from .runtime_settings import KedgeGeneration

__all__ = [
    "ConfigurationError",
    "GenerationError",
    "KedgeGeneration",
    "load_kedge_generation",
]
