# koine\__init__.py
"""
Koine Greek sentence generator.

This package composes grammatically plausible simple sentences from a fixed
New Testament Greek vocabulary. It follows the same layering as a classic
NLG service:
- `koine.core.domain`: grammatical categories, morphology and constructions.
- `koine.lexicon`: vocabulary and ending tables.
- `koine.core.use_cases`: batch generation.
- `koine.api`: public entry points.
"""

__version__ = "1.0.0"
