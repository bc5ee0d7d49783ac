import json
import logging
import sys

from fitquest.logging import JSONFormatter, TextFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="fitquest.ledger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Level up to %d",
        args=(3,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    entry = json.loads(JSONFormatter().format(_record(fitquest_levels=[2, 3], other="x")))
    assert entry["level"] == "INFO"
    assert entry["logger"] == "fitquest.ledger"
    assert entry["message"] == "Level up to 3"
    assert entry["fitquest_levels"] == [2, 3]
    assert "other" not in entry


def test_json_formatter_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    entry = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in entry["exception"]


def test_text_formatter_appends_extras():
    line = TextFormatter().format(_record(fitquest_dropped=2, fitquest_budget_minutes=30))
    assert line.endswith("fitquest.ledger: Level up to 3 [dropped=2 budget_minutes=30]")


def test_text_formatter_without_extras():
    line = TextFormatter().format(_record())
    assert line.endswith("INFO fitquest.ledger: Level up to 3")


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved, level = root.handlers[:], root.level
    try:
        setup_logging("json", logging.WARNING)
        setup_logging("json", logging.WARNING)
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved
        root.setLevel(level)
