"""Test configuration for Font Optimizer.

Network access is simulated with ``httpx.MockTransport``; no test talks to a
real font provider.
"""

from types import MappingProxyType

import pytest

from font_optimizer.config import Settings
from tests.stylesheet_server import StylesheetServer


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def stylesheet_server():
    """Fake stylesheet host."""
    return StylesheetServer()


@pytest.fixture
def font_metrics():
    """Small metrics table covering serif and sans-serif families."""
    return MappingProxyType(
        {
            "opensans": {
                "category": "sans-serif",
                "ascentOverride": 0.905,
                "descentOverride": 0.212,
                "lineGapOverride": 0.0,
            },
            "roboto": {
                "category": "sans-serif",
                "ascentOverride": 0.927734375,
                "descentOverride": 0.244140625,
                "lineGapOverride": 0,
            },
            "merriweather": {
                "category": "serif",
                "ascentOverride": 0.984,
                "descentOverride": 0.273,
                "lineGapOverride": 0,
            },
        }
    )
