"""
Logging setup for mux_builder.

File paths, track titles and language tags come from plan files and can
contain newlines or carriage returns that would forge extra log lines.
install_safe_logging() swaps in a LogRecord factory that escapes them.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_ORIGINAL_FACTORY = logging.getLogRecordFactory()


def _sanitize_value(value):
    """Escape CR/LF in string values."""
    if isinstance(value, str):
        return value.replace('\r\n', '\\r\\n').replace('\r', '\\r').replace('\n', '\\n')
    return value


def _safe_record_factory(*args, **kwargs):
    record = _ORIGINAL_FACTORY(*args, **kwargs)
    if record.args:
        if isinstance(record.args, dict):
            record.args = {k: _sanitize_value(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(_sanitize_value(a) for a in record.args)
    # f-string messages arrive pre-formatted with no args
    record.msg = _sanitize_value(record.msg)
    return record


def install_safe_logging():
    """Install the sanitizing LogRecord factory globally."""
    logging.setLogRecordFactory(_safe_record_factory)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    install_safe_logging()
