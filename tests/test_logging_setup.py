import json
import logging

import pytest

from screener.logging_setup import JSONFormatter, setup_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)


def test_json_formatter():
    record = logging.LogRecord("screener.rules", logging.INFO, __file__, 1, "Breakout candidate %s", ("فولاد",), None)
    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "INFO"
    assert data["name"] == "screener.rules"
    assert data["msg"] == "Breakout candidate فولاد"


def test_setup_logging_writes_file(tmp_path, restore_root):
    setup_logging(tmp_path / "logs")
    logging.getLogger("screener.test").info("hello")
    for h in logging.getLogger().handlers:
        h.flush()
    line = (tmp_path / "logs" / "screener.log").read_text(encoding="utf-8").strip().splitlines()[-1]
    assert json.loads(line)["msg"] == "hello"
