""" Structured logging configuration... """

# Python Packages
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Constants
from ..base import constants





class JsonLogFormatter(logging.Formatter):
    """
    Format log records as JSON lines for downstream ingestion
    """

    EXTRA_FIELDS = ("user", "request_id", "component", "ip_address", "path")

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz = timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage()
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for attr in self.EXTRA_FIELDS:
            if hasattr(record, attr):
                payload[attr] = getattr(record, attr)

        return json.dumps(payload, ensure_ascii = False, default = str)



def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Install the JSON handler on the root logger once per process
    """

    root_logger = logging.getLogger()

    if any(isinstance(h.formatter, JsonLogFormatter) for h in root_logger.handlers):
        return

    level_name = log_level or constants.LOG_LEVEL
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonLogFormatter())

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Third-party chatter
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("PyPDF2").setLevel(logging.ERROR)
