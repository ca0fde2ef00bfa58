"""
Module for centralized, configurable logging across multistl packages.
"""

import logging
import os
import json
from datetime import datetime, timezone


_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record: timestamp (ISO8601, UTC), level, name and
    message, plus any fields passed through ``extra=`` (e.g. the period and
    iteration of a single STL fit).
    """

    def format(self, record):
        record_dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and key not in record_dict:
                record_dict[key] = value
        if record.exc_info:
            record_dict["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(record_dict, default=str)


class Logger:
    """
    Central logging setup for all modules.
    """

    _configured = False

    @staticmethod
    def setup(
        level: int | None = None,
        fmt: str | None = None,
        datefmt: str = "%Y-%m-%d %H:%M:%S",
    ) -> None:
        """
        Configure the logging system once.

        If level is not provided, reads from the MULTISTL_LOG_LEVEL environment
        variable. MULTISTL_LOG_FMT=json switches to one JSON object per line.
        """
        if Logger._configured:
            return
        if level is None:
            env_level = os.getenv("MULTISTL_LOG_LEVEL", "INFO").upper()
            effective_level = getattr(logging, env_level, logging.INFO)
        else:
            effective_level = level

        fmt_mode = fmt if fmt is not None else os.getenv("MULTISTL_LOG_FMT", "")
        default_fmt = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
        root = logging.getLogger()
        root.handlers.clear()

        if fmt_mode.lower() == "json":
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter(datefmt=datefmt))
            root.addHandler(handler)
            root.setLevel(effective_level)
        else:
            # basicConfig is a no-op unless the root has no handlers
            logging.basicConfig(
                level=effective_level,
                format=fmt_mode or default_fmt,
                datefmt=datefmt,
            )
        Logger._configured = True

    @staticmethod
    def get_logger(name: str = "multistl") -> logging.Logger:
        """
        Return the named logger.

        Library modules call this at import time, so it does not configure
        handlers; entry points call :meth:`setup`.
        """
        return logging.getLogger(name)
