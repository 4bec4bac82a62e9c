import sys
from logging.config import dictConfig

from salesflow.core.config import LOG_LEVEL


def build_logging_config(level: str = LOG_LEVEL) -> dict:
    handler = {
        "class": "logging.StreamHandler",
        "stream": sys.stdout,
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
            # request line plus the snapshot version that answered it
            "access": {
                "format": (
                    "%(asctime)s | ACCESS | %(client_addr)s | %(message)s | "
                    "%(status_code)s | %(process_time_ms)sms | "
                    "snapshot=v%(snapshot_version)s"
                ),
            },
        },
        "handlers": {
            "console": {**handler, "formatter": "default"},
            "access_console": {**handler, "formatter": "access"},
        },
        "loggers": {
            "access": {
                "handlers": ["access_console"],
                "level": "INFO",
                "propagate": False,
            },
            "apscheduler": {"level": "WARNING"},
            # engine debug output is opt-in via LOG_LEVEL=DEBUG
            "salesflow.services.process_flow": {"level": level},
            "process_flow.snapshot": {"level": level},
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def setup_logging():
    dictConfig(build_logging_config())
