# tests\core\test_use_cases.py
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from koine.core.domain.constructions import SentenceComposer
from koine.core.domain.exceptions import CategoryLookupError, GenerationError
from koine.core.use_cases import GenerateSentences


class TestGenerateSentences:
    def test_returns_requested_number_of_sentences(self, morphology, make_composer, seeded_rng):
        use_case = GenerateSentences(make_composer(morphology, seeded_rng))
        sentences = use_case.execute(5)
        assert len(sentences) == 5
        assert all(s[-1] in ".;·" for s in sentences)

    def test_zero_is_empty(self, morphology, make_composer, seeded_rng):
        assert GenerateSentences(make_composer(morphology, seeded_rng)).execute(0) == []

    def test_negative_count_is_rejected(self, morphology, make_composer, seeded_rng):
        with pytest.raises(ValueError):
            GenerateSentences(make_composer(morphology, seeded_rng)).execute(-1)

    def test_logs_the_batch(self, morphology, make_composer, seeded_rng):
        with capture_logs() as logs:
            use_case = GenerateSentences(make_composer(morphology, seeded_rng))
            use_case.execute(3)

        events = [entry["event"] for entry in logs]
        assert events[0] == "generation_started"
        assert events[-1] == "sentences_generated"
        assert logs[-1]["count"] == 3
        assert events.count("sentence_generated") == 3

    def test_domain_errors_propagate_unchanged(self):
        composer = MagicMock(spec=SentenceComposer)
        composer.random_sentence.side_effect = CategoryLookupError("verb_endings", (4,))

        with pytest.raises(CategoryLookupError):
            GenerateSentences(composer).execute(1)

    def test_unexpected_errors_are_wrapped(self):
        composer = MagicMock(spec=SentenceComposer)
        composer.random_sentence.side_effect = RuntimeError("boom")

        with capture_logs() as logs:
            use_case = GenerateSentences(composer)
            with pytest.raises(GenerationError) as info:
                use_case.execute(2)

        assert isinstance(info.value.__cause__, RuntimeError)
        assert "boom" in info.value.message
        assert logs[-1]["event"] == "generation_failed"
