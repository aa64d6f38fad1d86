"""
lexicon/vocabulary.py
=====================

Static Koine Greek vocabulary and ending tables.

Vocabulary and grammar follow Duff, *The Elements of New Testament Greek*
(3rd ed.), chapters 3 to 5. Words are written without accents; breathings
are kept on initial vowels.

All data here is built once at import time. Any authoring mistake (a table
with a missing cell, a preposition without a case) raises
`ConfigurationError` while the module loads, never during generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Tuple

import structlog

from koine.core.domain.exceptions import ConfigurationError
from koine.core.domain.models import GENDERS, PUNCTUATIONS, Gender, Preposition
from koine.lexicon.tables import EndingTable, cng_table, pn_table, prep_table

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Ending tables
# ---------------------------------------------------------------------------

ARTICLES = cng_table("articles", """
    ὁ    ἡ    το
    τον  την  το
    του  της  του
    τῳ   τῃ   τῳ
    οἱ   αἱ   τα
    τους τας  τα
    των  των  των
    τοις ταις τοις
""")

NOUN_ENDINGS = cng_table("noun_endings", """
    ος  η   ον
    ον  ην  ον
    ου  ης  ου
    ῳ   ῃ   ῳ
    οι  αι  α
    ους ας  α
    ων  ων  ων
    οις αις οις
""")

AUTOS_FORMS = cng_table("autos", """
    αὐτος  αὐτη   αὐτο
    αὐτον  αὐτην  αὐτο
    αὐτου  αὐτης  αὐτου
    αὐτῳ   αὐτῃ   αὐτῳ
    αὐτοι  αὐται  αὐτα
    αὐτους αὐτας  αὐτα
    αὐτων  αὐτων  αὐτων
    αὐτοις αὐταις αὐτοις
""")

VERB_ENDINGS = pn_table("verb_endings", """
    ω
    εις
    ει
    ομεν
    ετε
    ουσιν
""")


# ---------------------------------------------------------------------------
# Stems
# ---------------------------------------------------------------------------

# Chapter 3 then chapter 4 vocabulary.
VERB_STEMS: Tuple[str, ...] = (
    "ἀγ", "ἀκου", "βαλλ", "βλεπ", "διδασκ", "ἐχ", "λαμβαν", "λεγ", "λυ",
    "ζητε", "καλε", "λαλε", "ποιε", "τηρε", "φιλε", "πιστευ",

    "ἀναβλεπ", "ἀπολυ", "ἐκβαλλ", "ἐπικαλε", "κατοικε", "παρακαλε",
    "παραλαμβαν", "περιπατε", "προσκυνε", "συναγ", "ὑπαγ",
)

NOUN_STEMS: Mapping[Gender, Tuple[str, ...]] = MappingProxyType({
    Gender.MASCULINE: (
        "ἀγγελ", "ἀδελφ", "ἀρτ", "δουλ", "θε", "κοσμ", "κυρι", "λογ", "νομ",
        "οἰκ", "οὐραν", "ὀχλ", "υἱ", "Χριστ", "ἀνθρωπ", "λα", "Παυλ", "Πετρ",

        "καιρ",
    ),
    Gender.FEMININE: (
        "ἀγαπ", "ἀδελφ", "ἀρχ", "γ", "ζω", "φων", "ψυχ", "ἀμαρτι", "βασιλει",
        "ἐκκλησι", "ἡμερ", "καρδι", "Μαρι", "οἰκι", "ὡρ", "δοξ", "θαλασσ",

        "εἰρην", "κεφαλ", "συναγωγ", "Γαλιλαι",
    ),
    Gender.NEUTER: (
        "βιβλι", "δαιμονι", "ἐργ", "εὐαγγελι", "ἱερ", "πλοι", "προσωπ",
        "σαββατ", "σημει", "τεκν",
    ),
})

# Declined with gender agreement at the point of use.
ADJECTIVE_STEMS: Tuple[str, ...] = (
    "ἀγαθ", "ἁγι", "ἑτερ", "ἰδι", "Ἰουδαι", "καλ", "μακαρι", "μον", "νεκρ",
    "ὁσ", "πονηρ", "τυφλ", "ἀγαπητ", "δικαι", "ἑκαστ", "κακ", "καιν", "πιστ",
)

PREPOSITIONS: Tuple[Preposition, ...] = prep_table("""
    ἀπο     gen
    δια     acc gen
    εἰς     acc
    ἐκ      gen
    ἐν      dat
    ἐνωπιον gen
    ἐξω     gen
    ἐπι     acc gen dat
    ἑως     gen
    κατα    acc gen
    μετα    acc gen
    παρα    acc gen dat
    περι    acc gen
    προ     gen
    προς    acc
    συν     dat
    ὑπερ    acc gen
    ὑπο     acc gen
""")


# ---------------------------------------------------------------------------
# Lexicon bundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Lexicon:
    """
    Everything the inflector and the constructions read.

    Tests and callers may derive a narrower lexicon with
    `dataclasses.replace(load_lexicon(), verb_stems=(...,))`.
    """

    articles: EndingTable
    noun_endings: EndingTable
    autos_forms: EndingTable
    verb_endings: EndingTable
    noun_stems: Mapping[Gender, Tuple[str, ...]]
    verb_stems: Tuple[str, ...]
    adjective_stems: Tuple[str, ...]
    prepositions: Tuple[Preposition, ...]
    punctuations: Tuple[str, ...] = PUNCTUATIONS

    def __post_init__(self):
        for gender in GENDERS:
            if not self.noun_stems.get(gender):
                raise ConfigurationError(f"no noun stems for gender '{gender.value}'")
        if not self.verb_stems:
            raise ConfigurationError("no verb stems")
        if not self.prepositions:
            raise ConfigurationError("no prepositions")
        if not self.punctuations:
            raise ConfigurationError("no punctuation marks")
        for stem in (*self.verb_stems, *self.adjective_stems, *(s for stems in self.noun_stems.values() for s in stems)):
            if not stem or stem != stem.strip():
                raise ConfigurationError(f"malformed stem {stem!r}")


@lru_cache(maxsize=1)
def load_lexicon() -> Lexicon:
    """Return the process-wide (immutable) Koine lexicon."""
    lexicon = Lexicon(
        articles=ARTICLES,
        noun_endings=NOUN_ENDINGS,
        autos_forms=AUTOS_FORMS,
        verb_endings=VERB_ENDINGS,
        noun_stems=NOUN_STEMS,
        verb_stems=VERB_STEMS,
        adjective_stems=ADJECTIVE_STEMS,
        prepositions=PREPOSITIONS,
    )
    logger.debug(
        "lexicon_loaded",
        verbs=len(lexicon.verb_stems),
        nouns=sum(len(stems) for stems in lexicon.noun_stems.values()),
        adjectives=len(lexicon.adjective_stems),
        prepositions=len(lexicon.prepositions),
    )
    return lexicon
