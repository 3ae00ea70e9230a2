import logging

from bubble.logging_config import HealthCheckFilter, get_logging_config


def _record(name: str, message: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 0, message, None, None)


def test_health_check_access_logs_suppressed():
    log_filter = HealthCheckFilter()

    assert log_filter.filter(_record("uvicorn.access", '127.0.0.1 - "GET /health HTTP/1.1" 200')) is False


def test_other_access_logs_kept():
    log_filter = HealthCheckFilter()

    assert log_filter.filter(_record("uvicorn.access", '127.0.0.1 - "POST /execute HTTP/1.1" 200')) is True
    assert log_filter.filter(_record("bubble.main", "GET /health")) is True


def test_level_override():
    config = get_logging_config("debug")

    assert config["loggers"]["bubble"]["level"] == "DEBUG"
    assert config["root"]["level"] == "DEBUG"


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    config = get_logging_config()

    assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"
