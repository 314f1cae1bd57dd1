import json
import logging
import sys

from core.logging_config import StructuredFormatter, setup_logging


def test_structured_formatter_emits_json():
    record = logging.LogRecord(
        name="engine.runner",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Forecast %r ready",
        args=("Test",),
        exc_info=None,
    )
    record.extra_data = {"scenario_id": "abc"}

    entry = json.loads(StructuredFormatter().format(record))
    assert entry["level"] == "INFO"
    assert entry["logger"] == "engine.runner"
    assert entry["message"] == "Forecast 'Test' ready"
    assert entry["scenario_id"] == "abc"


def test_setup_logging_writes_to_stderr(monkeypatch):
    captured = {}

    def fake_basic_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    setup_logging(level="info", fmt="json")

    (handler,) = captured["handlers"]
    assert handler.stream is sys.stderr
    assert isinstance(handler.formatter, StructuredFormatter)
    assert captured["level"] == logging.INFO
