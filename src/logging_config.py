# src/logging_config.py
# Root logger set-up: structured JSON lines by default, plain text on request.

import logging
import sys

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = record.created
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno


def _is_app_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_insights_handler", False)


def setup_logging(log_level_str: str = "INFO", json_logs: bool = True) -> None:
    """
    Installs a single stdout handler on the root logger.

    Safe to call more than once: an existing handler from a previous call is
    replaced rather than duplicated, so the level and format can be changed.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in [h for h in root_logger.handlers if _is_app_handler(h)]:
        root_logger.removeHandler(handler)

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler._insights_handler = True
    if json_logs:
        log_handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s'))
    else:
        log_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    root_logger.addHandler(log_handler)
    root_logger.info(f"Logging configured with level: {logging.getLevelName(log_level)} (json={json_logs})")
