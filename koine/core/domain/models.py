# koine\core\domain\models.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# --- Enums ---
# Values double as the short tags used in annotated output ("nom.sg.m", "3.pl").

class Case(str, Enum):
    """Grammatical role marking."""
    NOMINATIVE = "nom"   # subject
    ACCUSATIVE = "acc"   # direct object
    GENITIVE = "gen"     # possession / source
    DATIVE = "dat"       # indirect object / location

class Number(str, Enum):
    SINGULAR = "sg"
    PLURAL = "pl"

class Gender(str, Enum):
    MASCULINE = "m"
    FEMININE = "f"
    NEUTER = "n"

class Person(int, Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3

# Canonical orderings. Random selection and table construction both rely on
# these being tuples in exactly this order.
CASES: Tuple[Case, ...] = (Case.NOMINATIVE, Case.ACCUSATIVE, Case.GENITIVE, Case.DATIVE)
NUMBERS: Tuple[Number, ...] = (Number.SINGULAR, Number.PLURAL)
GENDERS: Tuple[Gender, ...] = (Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER)
PERSONS: Tuple[Person, ...] = (Person.FIRST, Person.SECOND, Person.THIRD)

PUNCTUATIONS: Tuple[str, ...] = (".", ";", "·")

# --- Entities ---

@dataclass(frozen=True)
class Preposition:
    """
    A preposition and the cases it may govern.
    `cases` keeps the declared order so random selection is reproducible.
    """
    text: str
    cases: Tuple[Case, ...]

    def governs(self, case: Case) -> bool:
        return case in self.cases


def tag(*axes) -> str:
    """Dot-joined short form of grammatical axes, e.g. tag(Case.GENITIVE, Number.PLURAL) == "gen.pl"."""
    return ".".join(str(axis.value) for axis in axes)
