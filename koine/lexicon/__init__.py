# koine\lexicon\__init__.py
"""
Static Koine vocabulary and ending tables.
"""

from .tables import EndingTable, cng_table, pn_table, prep_table
from .vocabulary import Lexicon, load_lexicon

__all__ = [
    "EndingTable",
    "cng_table",
    "pn_table",
    "prep_table",
    "Lexicon",
    "load_lexicon",
]
