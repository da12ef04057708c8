"""Tests for structured logging helpers."""

import json
import logging

from clearance_scout.logging_config import (
    ConsoleFormatter,
    ScanJsonFormatter,
    get_logger,
    new_correlation_id,
    setup_logging,
)


def _record(**extra):
    record = logging.LogRecord("clearance_scout.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_hoists_scan_context():
    formatter = ScanJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")

    payload = json.loads(formatter.format(_record(scan_id="scan-1", retailer="home-depot")))

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["service"] == "clearance-scout"
    assert payload["scan_id"] == "scan-1"
    assert payload["retailer"] == "home-depot"
    assert "correlation_id" not in payload


def test_console_formatter_suffix():
    formatter = ConsoleFormatter("%(message)s")
    assert formatter.format(_record()) == "hello world"
    assert formatter.format(_record(scan_id="abc")) == "hello world [scan=abc]"


def test_adapter_merges_context(caplog):
    log = get_logger("clearance_scout.test", scan_id="scan-9", correlation_id="c1")

    with caplog.at_level(logging.INFO, logger="clearance_scout.test"):
        log.info("step", extra={"retailer": "ace-hardware"})

    record = caplog.records[-1]
    assert record.scan_id == "scan-9"
    assert record.correlation_id == "c1"
    assert record.retailer == "ace-hardware"


def test_setup_logging_writes_json_files(tmp_path):
    root = logging.getLogger()
    previous = list(root.handlers)
    try:
        setup_logging(log_dir=tmp_path / "logs", to_file=True)
        logging.getLogger("clearance_scout.test").error("disk full")
        for handler in root.handlers:
            handler.flush()

        app_lines = (tmp_path / "logs" / "app.log").read_text().splitlines()
        error_lines = (tmp_path / "logs" / "error.log").read_text().splitlines()
        assert json.loads(app_lines[-1])["message"] == "disk full"
        assert json.loads(error_lines[-1])["level"] == "ERROR"
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = previous


def test_correlation_ids_are_unique():
    ids = {new_correlation_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(len(value) == 16 for value in ids)
