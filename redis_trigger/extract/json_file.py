"""
JSON File - Extract Layer

Reads the source document and validates that it parses as JSON.
The raw bytes are returned untouched so the stored value matches the file.
"""

import json
import logging
import os

from redis_trigger.exceptions import (
    InvalidJSONError,
    JSONFileNotFoundError,
    JSONFileReadError,
)

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    # NaN and Infinity are Python extensions, not JSON
    raise ValueError(f"invalid literal {name}")


def read_json_file(filepath: str) -> bytes:
    """
    Load a JSON file and validate its content

    Args:
        filepath: Path to JSON file

    Returns:
        bytes: File content exactly as stored on disk

    Raises:
        JSONFileNotFoundError: if the path does not exist
        JSONFileReadError: if the file cannot be read
        InvalidJSONError: if the content is not valid JSON
    """
    logger.info(f"Loading JSON from: {filepath}")

    try:
        os.stat(filepath)
    except FileNotFoundError as e:
        raise JSONFileNotFoundError(f"file does not exist: {filepath}") from e
    except OSError as e:
        raise JSONFileReadError(f"failed to read file: {e}") from e

    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except OSError as e:
        raise JSONFileReadError(f"failed to read file: {e}") from e

    try:
        json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise InvalidJSONError(f"invalid JSON format: {e}") from e

    logger.info(f"Loaded {len(data)} bytes of valid JSON from {filepath}")
    return data
