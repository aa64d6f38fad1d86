# tests\core\test_probability.py
import pytest
from pydantic import ValidationError

from koine.core.domain.probability import ProbabilityPolicy


def test_defaults():
    policy = ProbabilityPolicy()
    assert policy.subject_named == 0.8
    assert policy.direct_object == 0.7
    assert policy.indirect_object == 0.6
    assert policy.preposition == 0.5
    assert policy.possessed == 0.4
    assert policy.autos == 0.2
    assert policy.article == 0.7


def test_chance_compares_one_draw(pinned_random):
    policy = ProbabilityPolicy()
    rng = pinned_random(draw=0.5)
    assert policy.chance("article", rng) is True
    assert policy.chance("autos", rng) is False


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_out_of_range_is_rejected(value):
    with pytest.raises(ValidationError):
        ProbabilityPolicy(autos=value)


def test_unknown_names_are_rejected():
    with pytest.raises(ValidationError):
        ProbabilityPolicy(adjective=0.3)


def test_policy_is_frozen():
    policy = ProbabilityPolicy()
    with pytest.raises(ValidationError):
        policy.autos = 0.9
