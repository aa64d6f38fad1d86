# koine\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the grammatical vocabulary of the system (Case, Number,
Gender, Person, Preposition) together with the probability policy and the
error taxonomy used throughout the core.
"""
