import logging
import os
from datetime import datetime
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class MicrosecondFormatter(logging.Formatter):
    """Formatter that stamps records with microsecond resolution"""

    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        return ct.strftime(datefmt or "%Y-%m-%d %H:%M:%S.%f")


def setup_logging(level=logging.INFO, log_dir: Optional[str] = None):
    """Setup basic logging configuration

    Args:
        level: Root log level (int or level name such as "DEBUG")
        log_dir: If given, also write to log_dir/trigger_YYYY-MM-DD.log
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = MicrosecondFormatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                os.path.join(
                    log_dir, f"trigger_{datetime.now().strftime('%Y-%m-%d')}.log"
                )
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    return logging.getLogger("redis_trigger")
