# koine\core\__init__.py
"""
Core Domain Layer.

Pure generation logic: grammatical categories, the Greek inflection engine
and the phrase/sentence constructions. Nothing in here performs I/O; the
only implicit input is the random source handed in by the caller.
"""
