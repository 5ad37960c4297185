import json
import logging
import os
import subprocess
import sys

import pytest
import structlog

from backoff_sequence.core.config import settings
from backoff_sequence.sequence.calculators import Exponential
from backoff_sequence.sequence.exceptions import BackoffOverflowError
from backoff_sequence.utils.logger import configure_logging, get_logger

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


@pytest.fixture
def restore_logging(monkeypatch):
    yield
    monkeypatch.undo()
    structlog.reset_defaults()
    configure_logging(force=True)


def test_get_logger_returns_structlog_logger():
    logger = get_logger("backoff_sequence.tests")
    assert hasattr(logger, "warning")


def test_import_leaves_logging_untouched():
    code = (
        "import logging, structlog, backoff_sequence; "
        "print(structlog.is_configured(), len(logging.root.handlers))"
    )
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [PROJECT_ROOT, env.get("PYTHONPATH")])
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        env=env,
        cwd=PROJECT_ROOT,
        check=True,
    )
    assert result.stdout.strip() == "False 0"


def test_production_renders_json(monkeypatch, caplog, restore_logging):
    monkeypatch.setattr(settings, "APP_ENV", "production")
    configure_logging(force=True)

    with caplog.at_level(logging.WARNING):
        structlog.get_logger("backoff_sequence.tests.json").warning(
            "backoff_check", attempt=3
        )

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "backoff_check"
    assert payload["attempt"] == 3
    assert payload["level"] == "warning"


def test_overflow_is_logged(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(BackoffOverflowError):
            Exponential(2).value(64)
    assert any("backoff_overflow" in r.getMessage() for r in caplog.records)
