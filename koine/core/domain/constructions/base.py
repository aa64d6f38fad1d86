# constructions\base.py
"""
Base types for clause-level constructions.

A construction returns its output as a `Clause`: the ordered constituents
(each tagged with the grammatical role it fills), the closing punctuation
mark and the joined text. Keeping the roles around lets callers and tests
inspect *why* a word is in the sentence without re-parsing the Greek.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


__all__ = [
    "Role",
    "Constituent",
    "Clause",
]


class Role(str, Enum):
    VERB = "verb"
    SUBJECT = "subject"
    DIRECT_OBJECT = "direct_object"
    INDIRECT_OBJECT = "indirect_object"
    GENITIVE_OBJECT = "genitive_object"
    PREPOSITIONAL = "prepositional"


@dataclass(frozen=True)
class Constituent:
    role: Role
    text: str


@dataclass(frozen=True)
class Clause:
    """
    Surface-level result of realizing a sentence.

    - `constituents`: in final linear order.
    - `punctuation`: one of ".", ";", "·".
    """

    constituents: Tuple[Constituent, ...] = field(default_factory=tuple)
    punctuation: str = "."

    @property
    def tokens(self) -> List[str]:
        return [c.text for c in self.constituents]

    @property
    def text(self) -> str:
        return " ".join(self.tokens) + self.punctuation

    def roles(self) -> List[Role]:
        return [c.role for c in self.constituents]

    def has(self, role: Role) -> bool:
        return any(c.role is role for c in self.constituents)
