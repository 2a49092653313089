"""
Main Entry Point

Reads settings from the environment, waits for TRIGGER_TIME and writes the
JSON file into Redis. Exits 0 after a successful write, 1 on any failure.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from redis_trigger.coreutils.env import env_get, load_settings
from redis_trigger.coreutils.logging import setup_logging
from redis_trigger.exceptions import TriggerError
from redis_trigger.orchestration.pipeline import TriggerPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Write a JSON file into a Redis key at TRIGGER_TIME",
        epilog="Configured through JSON_PATH, REDIS_URL, KEY_NAME and TRIGGER_TIME.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Run in dry-run mode (validate, connect and wait, but skip the write)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else env_get("LOG_LEVEL", "INFO")
    setup_logging(log_level, log_dir=env_get("LOG_DIR"))

    try:
        settings = load_settings()
        result = TriggerPipeline(settings, dry_run=args.dry_run).run()
    except TriggerError as e:
        logger.error(f"❌ {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("🛑 Interrupted before the write completed")
        return 130

    logger.debug(f"Run result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
