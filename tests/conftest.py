# tests\conftest.py
import random

import pytest
import structlog

from koine.core.domain.constructions import PhraseBuilder, SentenceComposer
from koine.core.domain.morphology import HellenicMorphology
from koine.core.domain.probability import ProbabilityPolicy
from koine.lexicon import load_lexicon


class PinnedRandom(random.Random):
    """
    A random source that always takes the first option.

    `draw` is returned by every `random()` call, so a probability p succeeds
    exactly when draw < p. `pins` maps an option type to the value `choice`
    should return for sequences of that type. `shuffle` keeps the order.
    """

    def __init__(self, *, draw=0.999999, pins=None):
        super().__init__(0)
        self.draw = draw
        self.pins = dict(pins or {})

    def random(self):
        return self.draw

    def choice(self, seq):
        return self.pins.get(type(seq[0]), seq[0])

    def shuffle(self, x, *args, **kwargs):
        return None


@pytest.fixture
def lexicon():
    return load_lexicon()

@pytest.fixture
def morphology(lexicon):
    return HellenicMorphology("grc", {"lexicon": lexicon})

@pytest.fixture
def annotated_morphology(lexicon):
    return HellenicMorphology("grc", {"lexicon": lexicon, "annotate": True})

@pytest.fixture
def policy():
    return ProbabilityPolicy()

@pytest.fixture
def seeded_rng():
    return random.Random(1234)

@pytest.fixture
def make_composer(policy):
    """Factory: SentenceComposer for a given morphology and random source."""
    def _make(morphology, rng, probabilities=None, possessive_depth_limit=6):
        return SentenceComposer(
            morphology,
            probabilities or policy,
            rng,
            possessive_depth_limit=possessive_depth_limit,
        )
    return _make

@pytest.fixture
def make_phrases(policy):
    def _make(morphology, rng, probabilities=None, possessive_depth_limit=6):
        return PhraseBuilder(
            morphology,
            probabilities or policy,
            rng,
            possessive_depth_limit=possessive_depth_limit,
        )
    return _make

@pytest.fixture
def pinned_random():
    """The PinnedRandom class, for tests that script every random decision."""
    return PinnedRandom

@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
