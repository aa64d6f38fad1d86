# morphology\base.py
"""
morphology/base.py

Shared abstractions for morphology engines.

This module defines:
- Request / result dataclasses passed between constructions and engines.
- An abstract MorphologyEngine interface.
- A simple registry so engines can be created by language family.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Type


# ---------------------------------------------------------------------------
# Basic types
# ---------------------------------------------------------------------------

FeatureDict = Mapping[str, Any]
"""A mapping of feature name -> feature value.

Examples:
    {"case": Case.GENITIVE, "number": Number.PLURAL, "gender": Gender.FEMININE}
    {"person": Person.THIRD, "number": Number.SINGULAR}
"""


@dataclass(frozen=True)
class MorphRequest:
    """
    High-level request for an inflected word form.

    Attributes:
        lemma:
            The stem to inflect (e.g. "λογ", "ζητε"). Articles and
            pronouns are suppletive, so their lemma is informational only.
        pos:
            Part of speech tag: "NOUN", "ADJ", "VERB", "DET" or "PRON".
        features:
            Grammatical axes (case, number, gender, person).
        language_code:
            ISO language code, "grc" for the Koine engine.
    """

    lemma: str
    pos: str
    features: FeatureDict = field(default_factory=dict)
    language_code: Optional[str] = None


@dataclass(frozen=True)
class MorphResult:
    """
    Result of an inflection.

    Attributes:
        surface:
            The surface form without any annotation (e.g. "λογου").
        lemma:
            The stem the form was built from.
        pos:
            Part of speech of the returned form.
        features:
            The feature bundle that was actually used.
        debug:
            Rule trace: the base ending, whether the alpha override or a
            contraction applied, and the dot-joined category tag.
    """

    surface: str
    lemma: str
    pos: str
    features: FeatureDict = field(default_factory=dict)
    debug: Mapping[str, Any] = field(default_factory=dict)


class MorphologyError(RuntimeError):
    """Raised when a morphology engine cannot satisfy a given request."""

    pass


# ---------------------------------------------------------------------------
# Abstract engine interface
# ---------------------------------------------------------------------------


class MorphologyEngine(abc.ABC):
    """
    Base class for morphology engines.

    Engines are registered per language *family* and parameterised by a
    configuration mapping. Subclasses must implement `inflect()`.
    """

    #: Language family identifier, populated when the class is registered.
    family: str

    def __init__(self, language_code: str, config: Mapping[str, Any]):
        self.language_code = language_code
        self.config: Mapping[str, Any] = config

    @abc.abstractmethod
    def inflect(self, request: MorphRequest) -> MorphResult:
        """
        Compute an inflected form for the given request.

        Raise MorphologyError if the request cannot be satisfied (unknown
        part of speech, missing features).
        """
        raise NotImplementedError

    # Convenience wrapper -------------------------------------------------

    def inflect_simple(
        self,
        lemma: str,
        pos: str,
        features: Optional[FeatureDict] = None,
    ) -> str:
        """
        Convenience method when only the surface string is needed.

        Example:
            engine.inflect_simple("λογ", "NOUN", {
                "case": Case.GENITIVE,
                "number": Number.SINGULAR,
                "gender": Gender.MASCULINE,
            })
        """
        req = MorphRequest(
            lemma=lemma,
            pos=pos,
            features=features or {},
            language_code=self.language_code,
        )
        return self.inflect(req).surface


# ---------------------------------------------------------------------------
# Engine registry and factory
# ---------------------------------------------------------------------------

ENGINE_REGISTRY: Dict[str, Type[MorphologyEngine]] = {}
"""Global registry mapping language family name -> MorphologyEngine subclass."""


def register_engine(family: str):
    """
    Class decorator to register a MorphologyEngine subclass under a
    family name.

    Usage:

        @register_engine("hellenic")
        class HellenicMorphology(MorphologyEngine):
            ...
    """

    def decorator(cls: Type[MorphologyEngine]) -> Type[MorphologyEngine]:
        if not issubclass(cls, MorphologyEngine):
            raise TypeError("Only MorphologyEngine subclasses can be registered")

        if family in ENGINE_REGISTRY:
            raise ValueError(f"Engine already registered for family '{family}'")

        ENGINE_REGISTRY[family] = cls
        cls.family = family  # type: ignore[attr-defined]
        return cls

    return decorator


def create_engine(
    family: str,
    language_code: str,
    config: Mapping[str, Any],
) -> MorphologyEngine:
    """
    Factory function to create a morphology engine for a given family.

    Raises:
        KeyError: if no engine is registered for the given family.
    """
    try:
        cls = ENGINE_REGISTRY[family]
    except KeyError as exc:
        raise KeyError(
            f"No morphology engine registered for family '{family}'"
        ) from exc

    return cls(language_code=language_code, config=config)
