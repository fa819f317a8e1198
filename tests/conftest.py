"""Pytest configuration and fixtures."""

import json
import os
from unittest.mock import MagicMock

import pytest

from zeppbuilder.core import CounterIdGenerator
from zeppbuilder.handlers import BuilderHandler
from zeppbuilder.layout import LayoutGenerator
from zeppbuilder.widgets import WidgetScene, starter_scene


TEST_APP_ID = 1234567


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["ZEPP_LOG_LEVEL"] = "DEBUG"
    # No real Gemini calls from tests
    for key in ("GEMINI_API_KEY", "API_KEY", "ZEPP_GEMINI_API_KEY"):
        os.environ.pop(key, None)


class FixedAppIdSource:
    """App id source returning one known id."""

    def __init__(self, app_id: int = TEST_APP_ID) -> None:
        self.app_id = app_id

    def new_app_id(self) -> int:
        return self.app_id


# ============================================================================
# Scene Fixtures
# ============================================================================

@pytest.fixture
def id_generator():
    """Deterministic widget ids (w-1, w-2, ...)."""
    return CounterIdGenerator()


@pytest.fixture
def scene(id_generator):
    """Empty scene."""
    return WidgetScene(id_generator)


# ============================================================================
# Model Fixtures
# ============================================================================

@pytest.fixture
def sample_layout():
    """Layout as the model would return it."""
    return [
        {
            "type": "TODO_LIST",
            "name": "Tasks",
            "props": {"x": 90, "y": 140, "w": 300, "h": 200, "api_endpoint": "https://example.test/tasks"},
        },
        {
            "type": "VOICE_BUTTON",
            "name": "Mic",
            "props": {"x": 208, "y": 360, "w": 64, "h": 64, "normal_color": "#ef4444"},
        },
        {
            "type": "TEXT",
            "props": {"x": 140, "y": 60, "w": 200, "h": 60, "text": "Today", "color": "#ffffff"},
        },
    ]


@pytest.fixture
def mock_gemini_model(sample_layout):
    """Mock Gemini model returning the sample layout."""
    mock = MagicMock()
    mock.generate_json.return_value = json.dumps(sample_layout)
    mock.config = MagicMock()
    mock.config.model_name = "gemini-2.0-flash"
    return mock


@pytest.fixture
def layout_generator(mock_gemini_model):
    """Layout generator with mocked model."""
    return LayoutGenerator(model=mock_gemini_model)


# ============================================================================
# Handler Fixtures
# ============================================================================

@pytest.fixture
def builder(layout_generator):
    """Builder session on the starter scene with a fixed app id."""
    return BuilderHandler(
        layout_generator=layout_generator,
        scene=starter_scene(CounterIdGenerator()),
        app_id_source=FixedAppIdSource(),
    )
