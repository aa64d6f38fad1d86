from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

from koine.core.domain.probability import ProbabilityPolicy

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be set from
    the environment with the KOINE_ prefix (e.g. KOINE_RANDOM_SEED=7).
    """

    # --- Application Meta ---
    APP_NAME: str = "koine-sentences"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE
    OTEL_SERVICE_NAME: str = "koine-sentences"

    # --- Generation ---
    ANNOTATE: bool = False  # Suffix inflected words with [case.number.gender] / [person.number]
    RANDOM_SEED: Optional[int] = None  # None: seed from OS entropy
    POSSESSIVE_DEPTH_LIMIT: Optional[int] = Field(6, ge=0)  # None: unbounded genitive nesting

    # --- Probability Policy ---
    P_SUBJECT_NAMED: float = Field(0.8, ge=0.0, le=1.0)
    P_DIRECT_OBJECT: float = Field(0.7, ge=0.0, le=1.0)
    P_INDIRECT_OBJECT: float = Field(0.6, ge=0.0, le=1.0)
    P_PREPOSITION: float = Field(0.5, ge=0.0, le=1.0)
    P_POSSESSED: float = Field(0.4, ge=0.0, le=1.0)
    P_AUTOS: float = Field(0.2, ge=0.0, le=1.0)
    P_ARTICLE: float = Field(0.7, ge=0.0, le=1.0)

    @property
    def probabilities(self) -> ProbabilityPolicy:
        return ProbabilityPolicy(
            subject_named=self.P_SUBJECT_NAMED,
            direct_object=self.P_DIRECT_OBJECT,
            indirect_object=self.P_INDIRECT_OBJECT,
            preposition=self.P_PREPOSITION,
            possessed=self.P_POSSESSED,
            autos=self.P_AUTOS,
            article=self.P_ARTICLE,
        )

    model_config = SettingsConfigDict(env_prefix="KOINE_", env_file=".env", extra="ignore")

settings = Settings()
