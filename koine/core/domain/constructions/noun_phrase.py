# constructions\noun_phrase.py
"""
NOUN_PHRASE / PREPOSITIONAL_PHRASE CONSTRUCTIONS
------------------------------------------------

Noun phrases come in two shapes:

    αὐτου                      (pronoun, terminal)
    [article] noun [genitive]  e.g. "ὁ λογος του θεου"

The genitive modifier is itself a noun phrase, so phrases nest. Nesting is
capped by `possessive_depth_limit`; with the limit set to None it is only
bounded by the "possessed" probability.

Prepositional phrases pick a preposition and one of the cases it governs:

    ἐν τῃ ἡμερᾳ
"""

from __future__ import annotations

import random
from typing import List, Optional

import structlog

from koine.core.domain.models import GENDERS, NUMBERS, Case, Number
from koine.core.domain.morphology.hellenic import HellenicMorphology
from koine.core.domain.probability import ProbabilityPolicy

logger = structlog.get_logger()


class PhraseBuilder:
    """
    Builds noun phrases and prepositional phrases from a morphology engine,
    a probability policy and an explicit random source.
    """

    def __init__(
        self,
        morphology: HellenicMorphology,
        probabilities: ProbabilityPolicy,
        rng: random.Random,
        possessive_depth_limit: Optional[int] = None,
    ) -> None:
        if possessive_depth_limit is not None and possessive_depth_limit < 0:
            raise ValueError("possessive_depth_limit must be >= 0 or None")
        self.morphology = morphology
        self.lexicon = morphology.lexicon
        self.probabilities = probabilities
        self.rng = rng
        self.possessive_depth_limit = possessive_depth_limit

    def noun_phrase(self, case: Case, number: Optional[Number] = None, *, depth: int = 0) -> str:
        """
        Return a noun phrase in `case`. `number` is drawn at random when omitted.
        """
        if number is None:
            number = self.rng.choice(NUMBERS)

        if self.probabilities.chance("autos", self.rng):
            gender = self.rng.choice(GENDERS)
            return self.morphology.pronoun(case, number, gender)

        gender = self.rng.choice(GENDERS)
        stem = self.rng.choice(self.lexicon.noun_stems[gender])

        parts: List[str] = []
        if self.probabilities.chance("article", self.rng):
            parts.append(self.morphology.article(case, number, gender))
        parts.append(self.morphology.decline_noun(stem, case, number, gender))

        if not self._may_nest(depth):
            logger.debug("possessive_depth_reached", depth=depth)
        elif self.probabilities.chance("possessed", self.rng):
            parts.append(self.noun_phrase(Case.GENITIVE, depth=depth + 1))

        return " ".join(parts)

    def prepositional_phrase(self) -> str:
        preposition = self.rng.choice(self.lexicon.prepositions)
        case = self.rng.choice(preposition.cases)
        return f"{preposition.text} {self.noun_phrase(case)}"

    def _may_nest(self, depth: int) -> bool:
        return self.possessive_depth_limit is None or depth < self.possessive_depth_limit
