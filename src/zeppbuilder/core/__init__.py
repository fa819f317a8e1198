"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import ValidationError, ValidationResult, LayoutRequest
from .logging_config import configure_logging, get_logger, LogContext
from .json import extract_json_array, safe_json_dumps, strip_code_fence, JSONParseError
from .id import IdGenerator, UlidIdGenerator, CounterIdGenerator, WidgetID


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "LayoutRequest",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json_array",
    "safe_json_dumps",
    "strip_code_fence",
    "JSONParseError",
    # IDs
    "IdGenerator",
    "UlidIdGenerator",
    "CounterIdGenerator",
    "WidgetID",
    # DI
    "create_container",
]
