# morphology\hellenic.py
"""
Koine Greek morphology.

Builds surface forms from a stem and a grammatical category:
- first/second declension nouns and adjectives (with the alpha override
  for stems like ἡμερ- and δοξ-),
- the article and the third person pronoun αὐτος (table lookups),
- present active indicative verbs, including the contraction of ε-stems.

When `annotate` is set in the engine config, every noun, adjective,
pronoun and verb form is followed by a bracketed tag of the axes used to
produce it, e.g. "λογου[gen.sg.m]" or "ζητουμεν[1.pl]". Articles are left
untagged.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from koine.core.domain.models import Case, Gender, Number, Person, tag
from koine.lexicon.vocabulary import Lexicon, load_lexicon

from .base import MorphRequest, MorphResult, MorphologyEngine, MorphologyError, register_engine


# Stem finals after which η/ῃ of the singular ending become α/ᾳ.
_OPEN_FINALS = frozenset("αεηιουωρ")
_SIBILANT_FINALS = frozenset("ξσψ")
# Vowel-final stem that keeps η (ζωη).
_ETA_EXCEPTIONS = frozenset({"ζω"})

_CONTRACTING_VOWEL = "ε"
# Endings whose onset absorbs a stem-final ε without change. Checked before
# the bare ε/ο onsets below: "ει" and "ου" would otherwise match those.
_ABSORBING_ONSETS = ("αι", "ει", "οι", "υι", "αυ", "ευ", "ηυ", "ου", "η", "ω")


def takes_alpha_ending(stem: str, case: Case, number: Number, is_adjective: bool = False) -> bool:
    """
    True if the singular ending of `stem` shows α where the table has η.

    Two disjoint triggers:
    - stem ends in a vowel or ρ (ἡμερα, καρδια), except ζω;
    - stem ends in ξ, σ or ψ, nominative or accusative, nouns only (δοξα, δοξαν).
    """
    if number != Number.SINGULAR:
        return False
    final = stem[-1:]
    if final in _OPEN_FINALS and stem not in _ETA_EXCEPTIONS:
        return True
    return (
        final in _SIBILANT_FINALS
        and case in (Case.NOMINATIVE, Case.ACCUSATIVE)
        and not is_adjective
    )


def alpha_ending(ending: str) -> str:
    return ending.replace("η", "α", 1).replace("ῃ", "ᾳ", 1)


def contract_epsilon(stem: str, ending: str) -> str:
    """
    Join an ε-final verb stem to a personal ending.

        ζητε + ω     -> ζητω
        ζητε + ετε   -> ζητειτε
        ζητε + ομεν  -> ζητουμεν
    """
    base = stem[: -len(_CONTRACTING_VOWEL)]
    if ending.startswith(_ABSORBING_ONSETS):
        return base + ending
    if ending.startswith("ε"):
        return base + "ει" + ending[1:]
    if ending.startswith("ο"):
        return base + "ου" + ending[1:]
    return stem + ending


@register_engine("hellenic")
class HellenicMorphology(MorphologyEngine):
    """
    Morphology engine for Koine Greek.

    Config keys:
        lexicon:  a `Lexicon` (defaults to `load_lexicon()`).
        annotate: append "[axes]" tags to inflected forms (default False).
    """

    def __init__(self, language_code: str = "grc", config: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(language_code, config or {})
        self.lexicon: Lexicon = self.config.get("lexicon") or load_lexicon()
        self.annotate: bool = bool(self.config.get("annotate", False))

    # ------------------------------------------------------------------ #
    # Generic entry point
    # ------------------------------------------------------------------ #

    def inflect(self, request: MorphRequest) -> MorphResult:
        features = request.features
        try:
            if request.pos == "VERB":
                return self._verb(request.lemma, features["person"], features["number"])
            case, number, gender = features["case"], features["number"], features["gender"]
        except KeyError as exc:
            raise MorphologyError(f"Missing feature {exc.args[0]!r} for {request.pos} '{request.lemma}'") from None

        if request.pos == "NOUN":
            return self._nominal(request.lemma, case, number, gender, is_adjective=False)
        if request.pos == "ADJ":
            return self._nominal(request.lemma, case, number, gender, is_adjective=True)
        if request.pos == "DET":
            return self._suppletive("ὁ", "DET", self.lexicon.articles, case, number, gender)
        if request.pos == "PRON":
            return self._suppletive("αὐτος", "PRON", self.lexicon.autos_forms, case, number, gender)
        raise MorphologyError(f"Unsupported part of speech '{request.pos}'")

    # ------------------------------------------------------------------ #
    # Direct helpers used by the constructions
    # ------------------------------------------------------------------ #

    def decline_noun(self, stem: str, case: Case, number: Number, gender: Gender, is_adjective: bool = False) -> str:
        return self._render(self._nominal(stem, case, number, gender, is_adjective))

    def decline_adjective(self, stem: str, case: Case, number: Number, gender: Gender) -> str:
        return self.decline_noun(stem, case, number, gender, is_adjective=True)

    def inflect_verb(self, stem: str, person: Person, number: Number) -> str:
        return self._render(self._verb(stem, person, number))

    def article(self, case: Case, number: Number, gender: Gender) -> str:
        return self.lexicon.articles.lookup(case, number, gender)

    def pronoun(self, case: Case, number: Number, gender: Gender) -> str:
        return self._render(
            self._suppletive("αὐτος", "PRON", self.lexicon.autos_forms, case, number, gender)
        )

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _render(self, result: MorphResult) -> str:
        if self.annotate and result.pos != "DET":
            return f"{result.surface}[{result.debug['tag']}]"
        return result.surface

    def _nominal(self, stem, case, number, gender, is_adjective) -> MorphResult:
        base = self.lexicon.noun_endings.lookup(case, number, gender)
        override = takes_alpha_ending(stem, case, number, is_adjective)
        ending = alpha_ending(base) if override else base
        return MorphResult(
            surface=stem + ending,
            lemma=stem,
            pos="ADJ" if is_adjective else "NOUN",
            features={"case": case, "number": number, "gender": gender},
            debug={"ending": base, "alpha_override": override, "tag": tag(case, number, gender)},
        )

    def _verb(self, stem, person, number) -> MorphResult:
        ending = self.lexicon.verb_endings.lookup(person, number)
        contracted = stem.endswith(_CONTRACTING_VOWEL)
        surface = contract_epsilon(stem, ending) if contracted else stem + ending
        return MorphResult(
            surface=surface,
            lemma=stem,
            pos="VERB",
            features={"person": person, "number": number},
            debug={"ending": ending, "contracted": contracted, "tag": tag(person, number)},
        )

    def _suppletive(self, lemma, pos, table, case, number, gender) -> MorphResult:
        return MorphResult(
            surface=table.lookup(case, number, gender),
            lemma=lemma,
            pos=pos,
            features={"case": case, "number": number, "gender": gender},
            debug={"tag": tag(case, number, gender)},
        )
