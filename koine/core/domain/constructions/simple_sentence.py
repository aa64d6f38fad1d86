# constructions\simple_sentence.py
"""
SIMPLE_SENTENCE CONSTRUCTION
----------------------------

One finite verb plus optional arguments, in free word order:

    verb              person/number agreement with the subject
    subject           nominative; only for third person, and not always
                      (Greek marks the subject on the verb)
    direct object     accusative; not for πιστευω / προσκυνεω
    indirect object   dative
    genitive object   genitive; only for ἀκουω, in addition to the above
    prepositional     any preposition with a case it governs

Constituents are shuffled and closed with ".", ";" or "·".

Verb-specific rules match the *inflected* verb by prefix. An unrelated
stem whose forms start with one of these prefixes would be treated the
same way.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from koine.core.domain.models import NUMBERS, PERSONS, Case, Person
from koine.core.domain.morphology.hellenic import HellenicMorphology
from koine.core.domain.probability import ProbabilityPolicy

from .base import Clause, Constituent, Role
from .noun_phrase import PhraseBuilder

# Verbs whose complement is not a plain accusative in this fragment.
NO_ACCUSATIVE_PREFIXES: Tuple[str, ...] = ("πιστευ", "προσκυν")
# Verbs that take a genitive object.
GENITIVE_OBJECT_PREFIXES: Tuple[str, ...] = ("ἀκου",)


class SentenceComposer:
    """
    Composes random simple sentences.

    Each composer owns its random source; use one composer per thread.
    """

    def __init__(
        self,
        morphology: HellenicMorphology,
        probabilities: ProbabilityPolicy,
        rng: Optional[random.Random] = None,
        possessive_depth_limit: Optional[int] = None,
    ) -> None:
        self.morphology = morphology
        self.lexicon = morphology.lexicon
        self.probabilities = probabilities
        self.rng = rng if rng is not None else random.Random()
        self.phrases = PhraseBuilder(
            morphology,
            probabilities,
            self.rng,
            possessive_depth_limit=possessive_depth_limit,
        )

    def verb_and_subject(self) -> Tuple[str, Optional[str]]:
        person = self.rng.choice(PERSONS)
        number = self.rng.choice(NUMBERS)

        subject = None
        if person == Person.THIRD and self.probabilities.chance("subject_named", self.rng):
            subject = self.phrases.noun_phrase(Case.NOMINATIVE, number)

        verb = self.morphology.inflect_verb(self.rng.choice(self.lexicon.verb_stems), person, number)
        return verb, subject

    def compose(self) -> Clause:
        verb, subject = self.verb_and_subject()
        chance = self.probabilities.chance

        parts: List[Constituent] = [Constituent(Role.VERB, verb)]
        if subject is not None:
            parts.append(Constituent(Role.SUBJECT, subject))

        if chance("direct_object", self.rng) and not verb.startswith(NO_ACCUSATIVE_PREFIXES):
            parts.append(Constituent(Role.DIRECT_OBJECT, self.phrases.noun_phrase(Case.ACCUSATIVE)))
        if chance("indirect_object", self.rng):
            parts.append(Constituent(Role.INDIRECT_OBJECT, self.phrases.noun_phrase(Case.DATIVE)))
        if chance("direct_object", self.rng) and verb.startswith(GENITIVE_OBJECT_PREFIXES):
            parts.append(Constituent(Role.GENITIVE_OBJECT, self.phrases.noun_phrase(Case.GENITIVE)))
        if chance("preposition", self.rng):
            parts.append(Constituent(Role.PREPOSITIONAL, self.phrases.prepositional_phrase()))

        self.rng.shuffle(parts)
        return Clause(constituents=tuple(parts), punctuation=self.rng.choice(self.lexicon.punctuations))

    def random_sentence(self) -> str:
        return self.compose().text
