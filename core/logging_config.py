from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Optional

LOG_LEVEL_ENV = "OUDERRAAD_LOG_LEVEL"
LOG_FORMAT_ENV = "OUDERRAAD_LOG_FORMAT"


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            log_entry.update(getattr(record, "extra_data"))

        return json.dumps(log_entry, ensure_ascii=False)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure the root logger once, for command-line use. Library code never calls this."""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    log_format = (fmt or os.environ.get(LOG_FORMAT_ENV, "text")).lower()

    if log_format == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=[handler])
