# vista_dates/utilities/config_logging.py
import os

LOG_LEVEL = os.environ.get("VISTA_DATES_LOG_LEVEL", "WARNING").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "simple",
        },
    },
    "loggers": {
        # package logger only; the root logger belongs to the host application
        "vista_dates": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": True,
        },
    },
}
