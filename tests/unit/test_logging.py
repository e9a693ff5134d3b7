from __future__ import annotations

import json
import logging

from simcore.core.config import LoggingConfig
from simcore.core.logging import JsonFormatter, KeyValueFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    rec = logging.LogRecord("simcore.test", logging.INFO, __file__, 1, "backtest_completed", None, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_json_formatter_includes_extras() -> None:
    line = JsonFormatter().format(_record(symbol="XAUUSD", trades=3))
    payload = json.loads(line)
    assert payload["event"] == "backtest_completed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "simcore.test"
    assert payload["symbol"] == "XAUUSD"
    assert payload["trades"] == 3


def test_key_value_formatter_appends_context() -> None:
    line = KeyValueFormatter("%(levelname)s %(message)s").format(_record(seed=7, symbol="SPX"))
    assert line == "INFO backtest_completed seed=7 symbol=SPX"


def test_configure_logging_is_idempotent() -> None:
    configure_logging(LoggingConfig(level="debug", json_output=True))
    configure_logging(LoggingConfig(level="warning"))

    logger = logging.getLogger("simcore")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, KeyValueFormatter)
    assert logger.level == logging.WARNING
