import sys
import os
import base64

import pytest

# Ensure repo root on sys.path for imports like `codejudge...`
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from codejudge.core.config import Settings  # noqa: E402


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class RecordingSleep:
    """Stand-in for ``asyncio.sleep`` that records requested delays."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def calls_ms(self):
        return [round(s * 1000) for s in self.calls]


@pytest.fixture
def settings():
    return Settings(
        rapidapi_key="test-key",
        judge0_api_url="https://judge.example.test/",
        judge0_timeout_s=2.0,
    )


@pytest.fixture
def recording_sleep():
    return RecordingSleep()
