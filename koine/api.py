# koine/api.py

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import List, Optional

from koine.core.domain.constructions import SentenceComposer
from koine.core.domain.morphology import HellenicMorphology, create_engine
from koine.core.domain.probability import ProbabilityPolicy
from koine.core.use_cases import GenerateSentences
from koine.lexicon import Lexicon, load_lexicon
from koine.shared.config import settings

_ANNOTATION = re.compile(r"\[.*?\]")

_UNSET = object()


# ---------------------------------------------------------------------------
# Public data models
# ---------------------------------------------------------------------------


@dataclass
class GenerationOptions:
    """
    High-level generation controls.

    Fields left unset fall back to `koine.shared.config.settings`.
    """

    seed: Optional[int] = None
    annotate: Optional[bool] = None
    probabilities: Optional[ProbabilityPolicy] = None
    # None is a meaningful value here (unbounded), so "unset" needs its own marker.
    possessive_depth_limit: object = field(default=_UNSET)

    def resolved_seed(self) -> Optional[int]:
        return self.seed if self.seed is not None else settings.RANDOM_SEED

    def resolved_annotate(self) -> bool:
        return self.annotate if self.annotate is not None else settings.ANNOTATE

    def resolved_probabilities(self) -> ProbabilityPolicy:
        return self.probabilities if self.probabilities is not None else settings.probabilities

    def resolved_depth_limit(self) -> Optional[int]:
        if self.possessive_depth_limit is _UNSET:
            return settings.POSSESSIVE_DEPTH_LIMIT
        return self.possessive_depth_limit  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class SentenceSession:
    """
    Caches the lexicon and the morphology engines and hands out composers.

    Every composer gets its own random stream, so composers may be used from
    different threads without sharing state.
    """

    def __init__(self, *, lexicon: Optional[Lexicon] = None) -> None:
        self.lexicon = lexicon or load_lexicon()
        self._engine_cache: dict = {}

    # public API -------------------------------------------------------------

    def composer(
        self,
        *,
        options: Optional[GenerationOptions] = None,
        rng: Optional[random.Random] = None,
    ) -> SentenceComposer:
        options = options or GenerationOptions()
        if rng is None:
            rng = random.Random(options.resolved_seed())

        return SentenceComposer(
            self._get_engine(options.resolved_annotate()),
            options.resolved_probabilities(),
            rng,
            possessive_depth_limit=options.resolved_depth_limit(),
        )

    def generate(
        self,
        count: int,
        *,
        options: Optional[GenerationOptions] = None,
        rng: Optional[random.Random] = None,
    ) -> List[str]:
        """
        Main entry point: `count` sentences, each ending in ".", ";" or "·".
        """
        use_case = GenerateSentences(self.composer(options=options, rng=rng))
        return use_case.execute(count)

    # internal helpers -------------------------------------------------------

    def _get_engine(self, annotate: bool) -> HellenicMorphology:
        if annotate not in self._engine_cache:
            self._engine_cache[annotate] = create_engine(
                "hellenic",
                "grc",
                {"lexicon": self.lexicon, "annotate": annotate},
            )
        return self._engine_cache[annotate]


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------

_default_session: Optional[SentenceSession] = None


def _session() -> SentenceSession:
    global _default_session
    if _default_session is None:
        _default_session = SentenceSession()
    return _default_session


def generate_sentences(
    count: int,
    *,
    options: Optional[GenerationOptions] = None,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Stateless convenience wrapper around `SentenceSession.generate`.

    With a seed (in `options` or settings) the result is exactly
    reproducible; an explicit `rng` takes precedence over any seed.
    """
    return _session().generate(count, options=options, rng=rng)


def strip_annotations(text: str) -> str:
    """Remove every bracketed grammatical tag from an annotated sentence."""
    return _ANNOTATION.sub("", text)


__all__ = [
    "GenerationOptions",
    "SentenceSession",
    "generate_sentences",
    "strip_annotations",
]
