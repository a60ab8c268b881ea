import logging
import time
from typing import Optional

_logger: Optional[logging.Logger] = None


def logfmt_str_escape(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"' if not escaped or " " in escaped or escaped != value else escaped


def get_logger() -> logging.Logger:
    global _logger
    if not _logger:
        _logger = logging.getLogger("lamb")
        _logger.propagate = False
        if not _logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s %(levelname)s %(message)s", "%Y-%m-%dT%H:%M:%SZ"
            )
            formatter.converter = time.gmtime
            handler.setFormatter(formatter)
            _logger.addHandler(handler)
            _logger.setLevel(logging.INFO)
    return _logger
