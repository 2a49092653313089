import os
import sys
from datetime import datetime, timezone

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from redis_trigger.coreutils.env import Settings


FIXED_NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def json_file(tmp_path):
    path = tmp_path / "payload.json"
    path.write_bytes(b'{"campaign": "summer", "items": [1, 2, 3]}\n')
    return path


@pytest.fixture
def make_settings(json_file):
    def _make(**overrides):
        values = {
            "json_path": str(json_file),
            "redis_url": "redis://localhost:6379/0",
            "key_name": "campaign:current",
            "trigger_time": "2025-06-01T11:00:00Z",
        }
        values.update(overrides)
        return Settings(**values)

    return _make
