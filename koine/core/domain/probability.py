# koine\core\domain\probability.py
import random
from pydantic import BaseModel, ConfigDict, Field


class ProbabilityPolicy(BaseModel):
    """
    Named Bernoulli probabilities controlling which optional constituents
    make it into a sentence. Consulted by the phrase builder and the
    sentence composer; never mutated.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    subject_named: float = Field(0.8, ge=0.0, le=1.0, description="A third person subject is explicit")
    direct_object: float = Field(0.7, ge=0.0, le=1.0, description="Accusative object (and genitive object of hearing)")
    indirect_object: float = Field(0.6, ge=0.0, le=1.0, description="Dative object")
    preposition: float = Field(0.5, ge=0.0, le=1.0, description="Prepositional phrase")
    possessed: float = Field(0.4, ge=0.0, le=1.0, description="A noun phrase takes a genitive modifier")
    autos: float = Field(0.2, ge=0.0, le=1.0, description="A noun phrase is just a form of autos")
    article: float = Field(0.7, ge=0.0, le=1.0, description="A noun takes the article")

    def chance(self, name: str, rng: random.Random) -> bool:
        """Draw once from `rng` and return True with the named probability."""
        return rng.random() < getattr(self, name)
