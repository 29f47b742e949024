from __future__ import annotations

import logging

import pytest

from concordance_transformer.config import (
    DEFAULT_WRITER_ADDRESS,
    LOG_FORMAT,
    ConfigurationError,
    HttpClientConfig,
    InvalidLogLevelError,
    TransactionContextFilter,
    get_log_level,
    get_writer_config,
    parse_log_level,
)


def test_writer_config_defaults() -> None:
    config = get_writer_config()

    assert config.address == DEFAULT_WRITER_ADDRESS
    assert config.http.timeout_seconds == 30.0
    assert config.http.default_headers == {"Content-Type": "application/json"}


def test_writer_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WRITER_ADDRESS", " http://writer.internal:8080/ ")
    monkeypatch.setenv("WRITER_TIMEOUT_SECONDS", "2.5")

    config = get_writer_config()

    assert config.address == "http://writer.internal:8080/"
    assert config.http.timeout_seconds == 2.5


def test_blank_writer_address_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WRITER_ADDRESS", "   ")

    assert get_writer_config().address == DEFAULT_WRITER_ADDRESS


@pytest.mark.parametrize("raw", ["0", "-1", "later"])
def test_invalid_writer_timeout(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("WRITER_TIMEOUT_SECONDS", raw)

    with pytest.raises(ConfigurationError, match="WRITER_TIMEOUT_SECONDS"):
        get_writer_config()


def test_explicit_http_config_is_used() -> None:
    http = HttpClientConfig(name="custom", base_url="http://custom/")

    assert get_writer_config(http=http).http is http


@pytest.mark.parametrize(
    ("name", "level"),
    [("INFO", logging.INFO), ("debug", logging.DEBUG), (" Warning ", logging.WARNING)],
)
def test_parse_log_level(name: str, level: int) -> None:
    assert parse_log_level(name) == level


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(InvalidLogLevelError, match="Cannot parse log level: verbose"):
        parse_log_level("verbose")


def test_log_level_defaults_to_info() -> None:
    assert get_log_level() == logging.INFO


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    assert get_log_level() == logging.ERROR


def test_context_filter_fills_missing_transaction_id() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)

    assert TransactionContextFilter().filter(record)
    assert record.transaction_id == "-"  # type: ignore[attr-defined]
    assert record.uuid == "-"  # type: ignore[attr-defined]
    assert logging.Formatter(LOG_FORMAT).format(record).endswith("tid=- uuid=- message")


def test_context_filter_keeps_given_transaction_id() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)
    record.transaction_id = "tid_abc"

    TransactionContextFilter().filter(record)

    assert record.transaction_id == "tid_abc"


def test_context_filter_renders_concept_uuid() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)
    record.transaction_id = "tid_abc"
    record.uuid = "20db1bd6-59f9-4404-adb5-3165a448f8b0"

    TransactionContextFilter().filter(record)

    assert logging.Formatter(LOG_FORMAT).format(record).endswith(
        "tid=tid_abc uuid=20db1bd6-59f9-4404-adb5-3165a448f8b0 message"
    )
