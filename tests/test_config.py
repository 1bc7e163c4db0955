import json
import logging

from bankocr.config import LOGGER_NAME, Settings, configure_logging, format_run_summary


def test_settings_defaults():
    settings = Settings.from_env({})
    assert settings == Settings(encoding="utf-8", output_format="text", log_level="WARNING", log_format="text")


def test_settings_from_env_normalises_and_falls_back():
    settings = Settings.from_env(
        {
            "BANKOCR_ENCODING": " latin-1 ",
            "BANKOCR_OUTPUT_FORMAT": "JSONL",
            "BANKOCR_LOG_LEVEL": "debug",
            "BANKOCR_LOG_FORMAT": "yaml",
        }
    )
    assert settings.encoding == "latin-1"
    assert settings.output_format == "jsonl"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_configure_logging_is_idempotent(package_logger):
    assert package_logger.handlers == []

    logger = configure_logging(Settings(log_level="INFO"))
    handlers = list(logger.handlers)
    again = configure_logging(Settings(log_level="DEBUG"))

    assert again is logger is package_logger
    assert logger.name == LOGGER_NAME
    assert len(handlers) == 1
    assert again.handlers == handlers
    assert again.level == logging.DEBUG
    assert not again.propagate


def test_package_logger_starts_clean_after_cli_style_setup(package_logger):
    configure_logging(Settings(log_level="INFO"))
    assert len(package_logger.handlers) == 1


def test_package_logger_is_reset_between_tests(package_logger):
    # runs after the test above; the stderr handler it installed is gone
    assert package_logger.handlers == []
    assert package_logger.propagate


def test_run_summary_text_lists_counts_by_kind():
    line = format_run_summary("scan.txt", 3, {"success": 2, "bad_checksum": 1})
    assert line == "scan.txt: 3 entries (bad_checksum=1, success=2)"
    assert format_run_summary("one.txt", 1, {"success": 1}) == "one.txt: 1 entry (success=1)"
    assert format_run_summary("empty.txt", 0, {}) == "empty.txt: 0 entries"


def test_run_summary_json():
    record = json.loads(format_run_summary("scan.txt", 2, {"success": 2}, fmt="json"))
    assert record["event"] == "run_complete"
    assert record["input"] == "scan.txt"
    assert record["entries"] == 2
    assert record["by_kind"] == {"success": 2}
    assert record["ts"].endswith("+00:00")
