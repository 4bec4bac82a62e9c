import logging

from salesflow.core.logging import build_logging_config
from salesflow.middleware.request_logging import logger as access_logger


def test_engine_level_follows_configured_level():
    config = build_logging_config("WARNING")

    assert config["root"]["level"] == "WARNING"
    assert config["loggers"]["salesflow.services.process_flow"]["level"] == "WARNING"
    assert config["loggers"]["apscheduler"]["level"] == "WARNING"


def test_access_line_includes_snapshot_version(caplog):
    formatter = logging.Formatter(
        build_logging_config()["formatters"]["access"]["format"]
    )

    with caplog.at_level(logging.INFO, logger="access"):
        propagate = access_logger.propagate
        access_logger.propagate = True
        try:
            access_logger.info(
                "%s %s",
                "GET",
                "/process-flow",
                extra={
                    "client_addr": "127.0.0.1",
                    "status_code": 200,
                    "process_time_ms": 1.5,
                    "snapshot_version": 3,
                },
            )
        finally:
            access_logger.propagate = propagate

    line = formatter.format(caplog.records[-1])
    assert "GET /process-flow | 200 | 1.5ms | snapshot=v3" in line
