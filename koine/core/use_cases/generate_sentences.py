# koine/core/use_cases/generate_sentences.py
import structlog
from typing import List

from koine.core.domain.constructions import SentenceComposer
from koine.core.domain.exceptions import DomainError, GenerationError
from koine.shared.observability import get_tracer

tracer = get_tracer(__name__)

class GenerateSentences:
    """
    Use Case: produce a batch of random Koine sentences.

    Responsibilities:
    1. Validates the requested count.
    2. Drives the SentenceComposer once per sentence.
    3. Traces and logs the batch.
    4. Lets domain errors through; wraps anything else in GenerationError.
    """

    def __init__(self, composer: SentenceComposer):
        self.composer = composer
        self.logger = structlog.get_logger()

    def execute(self, count: int) -> List[str]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        with tracer.start_as_current_span("use_case.generate_sentences") as span:
            span.set_attribute("app.sentence_count", count)
            self.logger.info("generation_started", count=count)

            try:
                sentences = []
                for _ in range(count):
                    sentence = self.composer.random_sentence()
                    self.logger.debug("sentence_generated", text=sentence)
                    sentences.append(sentence)

            except DomainError as e:
                self.logger.error("generation_failed", error=e.message)
                raise
            except Exception as e:
                self.logger.error("generation_failed", error=str(e), exc_info=True)
                raise GenerationError(str(e)) from e

            self.logger.info("sentences_generated", count=len(sentences))
            return sentences
