# tests/test_logging_config.py
import json

import structlog

from koine.shared.logging_config import add_open_telemetry_spans, configure_logging


def test_json_logs_go_to_stderr(capsys):
    configure_logging(level="INFO", log_format="json")
    structlog.get_logger().info("lexicon_loaded", verbs=27)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "lexicon_loaded"
    assert record["verbs"] == 27
    assert record["level"] == "info"
    assert record["trace_id"] is None


def test_level_filter(capsys):
    configure_logging(level="WARNING", log_format="json")
    structlog.get_logger().info("hidden")
    structlog.get_logger().warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_span_processor_without_active_span():
    event = add_open_telemetry_spans(None, "info", {"event": "x"})
    assert event["trace_id"] is None
    assert event["span_id"] is None
