"""Widget Scene - ordered, id-keyed collection of widgets."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from zeppbuilder.core import get_logger
from zeppbuilder.core.id import IdGenerator, UlidIdGenerator
from .models import LayoutItem, Widget, WidgetProps, WidgetType


logger = get_logger(__name__)

CANVAS_SIZE = 480
TODOIST_TASKS_URL = "https://api.todoist.com/rest/v2/tasks"


class WidgetNotFoundError(KeyError):
    """No widget with the given id in the scene."""

    def __init__(self, widget_id: str) -> None:
        super().__init__(widget_id)
        self.widget_id = widget_id

    def __str__(self) -> str:
        return f"Widget not found: {self.widget_id}"


def default_props(widget_type: WidgetType) -> WidgetProps:
    """Props given to a freshly added widget of this type."""
    center = CANVAS_SIZE // 2
    props: dict[str, Any] = {
        "x": center - 50,
        "y": center - 25,
        "w": 100,
        "h": 50,
        "color": "#ffffff",
        "text_size": 36,
    }
    if widget_type in (WidgetType.TEXT, WidgetType.BUTTON):
        props["text"] = "Label"

    match widget_type:
        case WidgetType.CIRCLE:
            props.update(w=60, h=60, color="#3e8bf3")
        case WidgetType.BUTTON:
            props.update(normal_color="#3e8bf3", press_color="#2563eb", radius=12)
        case WidgetType.RECT:
            props.update(w=80, h=80, color="#3e8bf3", radius=8)
        case WidgetType.VOICE_BUTTON:
            props.update(x=center - 32, y=350, w=64, h=64, normal_color="#ef4444")
        case WidgetType.TODO_LIST:
            props.update(x=90, y=140, w=300, h=200, api_endpoint=TODOIST_TASKS_URL)
        case _:
            pass

    return WidgetProps(**props)


class WidgetScene:
    """
    The widget model for one editing session.

    Sequence order is paint order: later widgets render above earlier ones.
    Widgets are immutable; updates replace the record in place.
    """

    def __init__(self, id_generator: IdGenerator | None = None, widgets: Iterable[Widget] = ()) -> None:
        self.id_generator = id_generator or UlidIdGenerator()
        self._widgets: list[Widget] = []
        for widget in widgets:
            self._append(widget)

    def _append(self, widget: Widget) -> None:
        if any(w.id == widget.id for w in self._widgets):
            raise ValueError(f"Duplicate widget id: {widget.id}")
        self._widgets.append(widget)

    def _index(self, widget_id: str) -> int:
        for i, widget in enumerate(self._widgets):
            if widget.id == widget_id:
                return i
        raise WidgetNotFoundError(widget_id)

    def add(self, widget_type: WidgetType, name: str | None = None, props: Mapping[str, Any] | None = None) -> Widget:
        """Create a widget with type defaults and append it on top."""
        merged = WidgetProps.model_validate({**default_props(widget_type).model_dump(), **(props or {})})
        widget = Widget(
            id=self.id_generator.new_id(),
            type=widget_type,
            name=name or f"New {widget_type.value}",
            props=merged,
        )
        self._append(widget)
        logger.debug("widget_added", id=widget.id, type=widget_type.value)
        return widget

    def get(self, widget_id: str) -> Widget:
        return self._widgets[self._index(widget_id)]

    def update_props(self, widget_id: str, changes: Mapping[str, Any]) -> Widget:
        """Merge prop changes into a widget."""
        index = self._index(widget_id)
        current = self._widgets[index]
        merged = {**current.props.model_dump(), **changes}
        updated = current.model_copy(update={"props": WidgetProps.model_validate(merged)})
        self._widgets[index] = updated
        return updated

    def rename(self, widget_id: str, name: str) -> Widget:
        index = self._index(widget_id)
        updated = self._widgets[index].model_copy(update={"name": name})
        self._widgets[index] = updated
        return updated

    def remove(self, widget_id: str) -> Widget:
        removed = self._widgets.pop(self._index(widget_id))
        logger.debug("widget_removed", id=widget_id)
        return removed

    def replace_all(self, items: Iterable[LayoutItem]) -> list[Widget]:
        """Discard the scene and import generated items with fresh ids."""
        imported = [
            Widget(
                id=self.id_generator.new_id(),
                type=item.type,
                name=item.name or f"Widget {index}",
                props=item.props,
            )
            for index, item in enumerate(items)
        ]
        self._widgets = WidgetScene(self.id_generator, imported)._widgets
        logger.info("scene_replaced", widgets=len(imported))
        return list(imported)

    def copy(self) -> "WidgetScene":
        """Independent scene sharing this scene's id generator."""
        return WidgetScene(self.id_generator, self._widgets)

    def snapshot(self) -> tuple[Widget, ...]:
        """Immutable view used by a generation pass."""
        return tuple(self._widgets)

    def __iter__(self) -> Iterator[Widget]:
        return iter(tuple(self._widgets))

    def __len__(self) -> int:
        return len(self._widgets)

    def __contains__(self, widget_id: object) -> bool:
        return any(w.id == widget_id for w in self._widgets)


def starter_scene(id_generator: IdGenerator | None = None) -> WidgetScene:
    """Scene shown when a session starts: a single clock label."""
    scene = WidgetScene(id_generator)
    scene.add(
        WidgetType.TEXT,
        name="Time",
        props={"x": 140, "y": 50, "w": 200, "h": 80, "text": "10:09", "text_size": 72, "color": "#ffffff"},
    )
    return scene
