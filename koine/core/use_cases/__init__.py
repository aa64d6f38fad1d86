# koine\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

Each use case orchestrates domain objects for one action and is the place
where tracing, logging and error translation happen.
"""

from .generate_sentences import GenerateSentences

__all__ = [
    "GenerateSentences",
]
