"""
lexicon/tables.py
=================

Keyed ending tables and the builders that read them from flat literals.

Tables are written the way a grammar book prints them: one row per case,
one column per gender, the singular block above the plural block. The
builders turn those flat word lists into immutable mappings keyed by the
grammatical category tuple and refuse data of the wrong shape.

Ordering contract for case/number/gender (24 cells)::

    index  0-11   singular: nom m f n, acc m f n, gen m f n, dat m f n
    index 12-23   plural:   same layout

Ordering contract for person/number (6 cells)::

    1 sg, 2 sg, 3 sg, 1 pl, 2 pl, 3 pl
"""

from __future__ import annotations

from itertools import product
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from koine.core.domain.exceptions import CategoryLookupError, ConfigurationError
from koine.core.domain.models import (
    CASES,
    GENDERS,
    NUMBERS,
    PERSONS,
    Case,
    Preposition,
)


CategoryKey = Tuple[object, ...]


class EndingTable(Mapping[CategoryKey, str]):
    """
    Immutable mapping from a category tuple to a literal ending or word.

    The table is total over the product of its axes; this is checked once at
    construction, so lookups for well-typed keys cannot fail.
    """

    def __init__(self, name: str, axes: Sequence[Tuple[object, ...]], cells: Mapping[CategoryKey, str]):
        self.name = name
        self.axes = tuple(tuple(axis) for axis in axes)

        expected = set(product(*self.axes))
        if set(cells) != expected:
            raise ConfigurationError(
                f"table '{name}' covers {len(cells)} cells, expected {len(expected)}"
            )
        for key, value in cells.items():
            if not value:
                raise ConfigurationError(f"table '{name}' has an empty cell at {key!r}")

        self._cells: Mapping[CategoryKey, str] = MappingProxyType(dict(cells))

    def __getitem__(self, key: CategoryKey) -> str:
        try:
            return self._cells[key]
        except KeyError:
            raise CategoryLookupError(self.name, key) from None

    def __iter__(self) -> Iterator[CategoryKey]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"EndingTable({self.name!r}, {len(self)} cells)"

    def lookup(self, *key) -> str:
        return self[tuple(key)]

    def subtable(self, *prefix) -> Dict[CategoryKey, str]:
        """
        Partial-category lookup: all cells whose key starts with `prefix`,
        keyed by the remaining axes.

            NOUN_ENDINGS.subtable(Case.DATIVE, Number.SINGULAR)
            -> {(Gender.MASCULINE,): "ῳ", (Gender.FEMININE,): "ῃ", (Gender.NEUTER,): "ῳ"}
        """
        if len(prefix) > len(self.axes):
            raise CategoryLookupError(self.name, tuple(prefix))
        for axis, value in zip(self.axes, prefix):
            if value not in axis:
                raise CategoryLookupError(self.name, tuple(prefix))

        size = len(prefix)
        return {
            key[size:]: value
            for key, value in self._cells.items()
            if key[:size] == tuple(prefix)
        }


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _words(source) -> Sequence[str]:
    if isinstance(source, str):
        return source.split()
    return list(source)


def cng_table(name: str, source) -> EndingTable:
    """
    Read a 24-cell case/number/gender table, keyed (case, number, gender).
    """
    words = _words(source)
    if len(words) != 24:
        raise ConfigurationError(f"table '{name}' has {len(words)} entries, expected 24")

    cells = {}
    for n, number in enumerate(NUMBERS):
        for c, case in enumerate(CASES):
            for g, gender in enumerate(GENDERS):
                cells[(case, number, gender)] = words[n * 12 + c * 3 + g]
    return EndingTable(name, (CASES, NUMBERS, GENDERS), cells)


def pn_table(name: str, source) -> EndingTable:
    """
    Read a 6-cell person/number table, keyed (person, number).
    """
    words = _words(source)
    if len(words) != 6:
        raise ConfigurationError(f"table '{name}' has {len(words)} entries, expected 6")

    cells = {}
    for n, number in enumerate(NUMBERS):
        for p, person in enumerate(PERSONS):
            cells[(person, number)] = words[n * 3 + p]
    return EndingTable(name, (PERSONS, NUMBERS), cells)


def prep_table(source: str) -> Tuple[Preposition, ...]:
    """
    Parse "preposition case case ..." records, one per line.

    Blank lines are skipped. A line without any case, an unknown case name,
    a case listed twice or a preposition listed twice aborts the whole table.
    """
    prepositions = []
    seen = set()

    for lineno, line in enumerate(source.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue

        text, case_names = fields[0], fields[1:]
        if not case_names:
            raise ConfigurationError(f"preposition '{text}' (line {lineno}) governs no case")
        if text in seen:
            raise ConfigurationError(f"preposition '{text}' (line {lineno}) is listed twice")

        try:
            cases = tuple(Case(name) for name in case_names)
        except ValueError:
            raise ConfigurationError(
                f"preposition '{text}' (line {lineno}) has an unknown case in {case_names!r}"
            ) from None
        if len(set(cases)) != len(cases):
            raise ConfigurationError(f"preposition '{text}' (line {lineno}) repeats a case")

        seen.add(text)
        prepositions.append(Preposition(text=text, cases=cases))

    if not prepositions:
        raise ConfigurationError("preposition table is empty")
    return tuple(prepositions)
