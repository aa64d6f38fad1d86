# tests/test_config.py
import pytest
from pydantic import ValidationError

from koine.shared.config import LogFormat, Settings


def test_defaults(monkeypatch):
    for name in ("KOINE_LOG_FORMAT", "KOINE_ANNOTATE", "KOINE_RANDOM_SEED", "KOINE_POSSESSIVE_DEPTH_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.APP_NAME == "koine-sentences"
    assert cfg.LOG_FORMAT is LogFormat.CONSOLE
    assert cfg.ANNOTATE is False
    assert cfg.RANDOM_SEED is None
    assert cfg.POSSESSIVE_DEPTH_LIMIT == 6


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KOINE_P_AUTOS", "0.5")
    monkeypatch.setenv("KOINE_ANNOTATE", "true")
    monkeypatch.setenv("KOINE_RANDOM_SEED", "42")
    monkeypatch.setenv("KOINE_LOG_FORMAT", "json")

    cfg = Settings(_env_file=None)
    assert cfg.probabilities.autos == 0.5
    assert cfg.probabilities.article == 0.7
    assert cfg.ANNOTATE is True
    assert cfg.RANDOM_SEED == 42
    assert cfg.LOG_FORMAT is LogFormat.JSON


@pytest.mark.parametrize(
    "name, value",
    [
        ("KOINE_P_ARTICLE", "1.5"),
        ("KOINE_P_POSSESSED", "-0.2"),
        ("KOINE_POSSESSIVE_DEPTH_LIMIT", "-1"),
        ("KOINE_LOG_FORMAT", "xml"),
    ],
)
def test_invalid_values_fail(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
