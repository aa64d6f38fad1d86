# constructions\__init__.py
"""
Phrase and clause constructions.

- `noun_phrase.PhraseBuilder`: noun phrases and prepositional phrases.
- `simple_sentence.SentenceComposer`: verb, subject, objects and
  adjuncts assembled into one punctuated sentence.
"""

from .base import Clause, Constituent, Role
from .noun_phrase import PhraseBuilder
from .simple_sentence import SentenceComposer

__all__ = [
    "Clause",
    "Constituent",
    "Role",
    "PhraseBuilder",
    "SentenceComposer",
]
