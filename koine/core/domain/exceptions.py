# koine/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Static Data Errors ---

class ConfigurationError(DomainError):
    """Raised when a static table or vocabulary list is malformed (fatal, at startup)."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid lexicon data: {reason}")

class CategoryLookupError(DomainError, LookupError):
    """Raised when a grammatical category tuple is missing from an ending table."""
    def __init__(self, table: str, key: tuple):
        self.table = table
        self.key = key
        rendered = ".".join(str(getattr(axis, "value", axis)) for axis in key)
        super().__init__(f"No cell '{rendered}' in table '{table}'.")

# --- Process Errors ---

class GenerationError(DomainError):
    """Raised when sentence generation fails for a reason outside the domain taxonomy."""
    def __init__(self, details: str):
        super().__init__(f"Sentence generation failed: {details}")
