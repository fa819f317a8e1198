"""Widget model: types, props and the editable scene."""

from .models import LayoutItem, Widget, WidgetProps, WidgetType
from .scene import (
    CANVAS_SIZE,
    TODOIST_TASKS_URL,
    WidgetNotFoundError,
    WidgetScene,
    default_props,
    starter_scene,
)

__all__ = [
    "LayoutItem",
    "Widget",
    "WidgetProps",
    "WidgetType",
    "CANVAS_SIZE",
    "TODOIST_TASKS_URL",
    "WidgetNotFoundError",
    "WidgetScene",
    "default_props",
    "starter_scene",
]
