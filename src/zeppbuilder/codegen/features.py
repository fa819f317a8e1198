"""Scene feature predicates, evaluated once per generation pass."""

from collections.abc import Sequence
from dataclasses import dataclass

from zeppbuilder.widgets import TODOIST_TASKS_URL, Widget, WidgetType


@dataclass(frozen=True)
class SceneFeatures:
    """Which optional capabilities the scene needs."""

    has_todo_list: bool = False
    has_voice_button: bool = False
    tasks_endpoint: str | None = None
    api_token_placeholder: str | None = None

    @property
    def permissions(self) -> list[str]:
        """Runtime permissions implied by the features, without duplicates."""
        permissions = []
        if self.has_todo_list:
            permissions.append("internet")
        if self.has_voice_button:
            permissions.append("audio_record")
        return permissions


def has_type(widgets: Sequence[Widget], widget_type: WidgetType) -> bool:
    return any(w.type is widget_type for w in widgets)


def detect_features(widgets: Sequence[Widget]) -> SceneFeatures:
    """Compute features; the first TODO_LIST in sequence order supplies the endpoint."""
    first_list = next((w for w in widgets if w.type is WidgetType.TODO_LIST), None)
    return SceneFeatures(
        has_todo_list=first_list is not None,
        has_voice_button=has_type(widgets, WidgetType.VOICE_BUTTON),
        tasks_endpoint=(first_list.props.api_endpoint or TODOIST_TASKS_URL) if first_list else None,
        api_token_placeholder=first_list.props.api_token_placeholder if first_list else None,
    )
