from pathlib import Path

from log_config.logger import get_logger, log_performance, logger, setup_file_logging


def test_file_logging_creates_main_and_error_logs(tmp_path: Path) -> None:
    """Test that file logging writes the main log and the error log."""
    handler_ids = setup_file_logging(tmp_path / "logs")
    try:
        get_logger(__name__).error("detector failure for log test")
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)

    names = sorted(p.name for p in (tmp_path / "logs").iterdir())
    assert any(name.startswith("detector_") for name in names)
    assert any(name.startswith("errors_") for name in names)
    error_log = next((tmp_path / "logs").glob("errors_*.log"))
    assert "detector failure for log test" in error_log.read_text()


def test_log_performance_warns_only_over_limit() -> None:
    """Test that slow operations log a warning and fast ones log at debug."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        log_performance("detect", 150.0)
        log_performance("detect", 20.0)
    finally:
        logger.remove(handler_id)

    assert [r["level"].name for r in records] == ["WARNING", "DEBUG"]
    assert records[0]["message"] == "detect took 150.00ms, over the 100ms limit"
    assert records[1]["message"] == "detect took 20.00ms"
