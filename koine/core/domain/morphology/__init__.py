# morphology\__init__.py
"""
Morphology engines.

Importing this package registers the Hellenic engine so that
`create_engine("hellenic", "grc", config)` works without further setup.
"""

from .base import (
    MorphRequest,
    MorphResult,
    MorphologyEngine,
    MorphologyError,
    create_engine,
    register_engine,
)
from .hellenic import HellenicMorphology

__all__ = [
    "MorphRequest",
    "MorphResult",
    "MorphologyEngine",
    "MorphologyError",
    "create_engine",
    "register_engine",
    "HellenicMorphology",
]
