"""
Pipeline Orchestrator - Timed JSON to Redis write

One linear workflow:
1. Read and validate the JSON file
2. Connect to Redis and ping
3. Parse the trigger time
4. Wait until the trigger time
5. Write the file bytes to the target key

Every failure is fatal; nothing is retried.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from redis_trigger.coreutils.env import Settings
from redis_trigger.coreutils.time import (
    format_rfc3339_nano,
    parse_rfc3339_nano,
    utc_now,
)
from redis_trigger.extract.json_file import read_json_file
from redis_trigger.load.redis_store import connect, store_json
from redis_trigger.orchestration.scheduler import wait_for_trigger_time

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a completed pipeline run"""

    json_path: str
    key_name: str
    bytes_written: int
    waited_seconds: float
    written_at: datetime
    dry_run: bool = False


class TriggerPipeline:
    """Runs the read, connect, wait and write steps in order"""

    def __init__(
        self,
        settings: Settings,
        dry_run: bool = False,
        now: Callable[[], datetime] = utc_now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the pipeline

        Args:
            settings: job settings from the environment
            dry_run: If true, do everything except the final SET
            now: clock used for the wait and the completion timestamp
            sleep: blocking sleep used for the wait
        """
        self.settings = settings
        self.dry_run = dry_run
        self.now = now
        self.sleep = sleep

        if self.dry_run:
            logger.info("🔍 DRY RUN MODE: Redis write will be skipped")

    def run(self) -> RunResult:
        """
        Execute the pipeline

        Returns:
            RunResult: details of the write

        Raises:
            TriggerError: subclass matching the step that failed
        """
        settings = self.settings

        data = read_json_file(settings.json_path)

        client = connect(settings.redis_url)
        try:
            trigger_time = parse_rfc3339_nano(settings.trigger_time)
            logger.info(f"Trigger time set to: {format_rfc3339_nano(trigger_time)}")

            waited = wait_for_trigger_time(trigger_time, now=self.now, sleep=self.sleep)

            logger.info("🚀 Trigger time reached! Starting JSON to Redis operation...")
            if self.dry_run:
                logger.info(
                    f"🔍 DRY RUN: Would store {len(data)} bytes to Redis key {settings.key_name}"
                )
                written = 0
                written_at = self.now()
            else:
                written = store_json(client, settings.key_name, data)
                written_at = self.now()
                logger.info(
                    f"✅ Successfully stored JSON data from {settings.json_path} "
                    f"to Redis key {settings.key_name} at {format_rfc3339_nano(written_at)}"
                )
        finally:
            client.close()

        return RunResult(
            json_path=settings.json_path,
            key_name=settings.key_name,
            bytes_written=written,
            waited_seconds=waited,
            written_at=written_at,
            dry_run=self.dry_run,
        )
