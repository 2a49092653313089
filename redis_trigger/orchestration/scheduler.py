"""
Scheduler - Orchestration Layer

Blocks the job until its trigger time with a single sleep.
"""

import logging
import time
from datetime import datetime
from typing import Callable

from redis_trigger.coreutils.time import format_duration, format_rfc3339_nano, utc_now

logger = logging.getLogger(__name__)


def wait_for_trigger_time(
    trigger_time: datetime,
    now: Callable[[], datetime] = utc_now,
    sleep: Callable[[float], None] = time.sleep,
) -> float:
    """
    Wait until trigger_time is reached

    A trigger time in the past or equal to now returns immediately.

    Args:
        trigger_time: timezone-aware target time
        now: clock returning an aware datetime
        sleep: blocking sleep taking seconds

    Returns:
        float: seconds slept (0.0 when executing immediately)
    """
    current = now()
    trigger_text = format_rfc3339_nano(trigger_time)

    if trigger_time <= current:
        logger.info(
            f"Trigger time ({trigger_text}) is in the past or now. Executing immediately."
        )
        return 0.0

    duration = (trigger_time - current).total_seconds()
    logger.info(
        f"⏳ Waiting {format_duration(duration)} until trigger time ({trigger_text})..."
    )

    sleep(duration)
    logger.info(f"Reached trigger time: {trigger_text}")
    return duration
