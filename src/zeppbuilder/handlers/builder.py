"""Builder Handler - one editing session over a widget scene."""

import threading
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from zeppbuilder.codegen import AppIdSource, GeneratedProject, RandomAppIdSource, generate_project
from zeppbuilder.core import LogContext, get_logger
from zeppbuilder.export import build_archive
from zeppbuilder.layout import LayoutGenerator
from zeppbuilder.widgets import Widget, WidgetScene, WidgetType, starter_scene


logger = get_logger(__name__)

T = TypeVar("T")


class BuilderHandler:
    """
    Owns the scene and the artifacts generated from it.

    Every mutation is applied to a copy of the scene and regenerated; only a
    successful pass replaces the current scene and artifacts. A failed
    mutation leaves both untouched. Mutations are serialized.
    """

    def __init__(
        self,
        layout_generator: LayoutGenerator,
        scene: WidgetScene | None = None,
        app_id_source: AppIdSource | None = None,
    ) -> None:
        self.layout_generator = layout_generator
        self._lock = threading.Lock()
        self.app_id = (app_id_source or RandomAppIdSource()).new_app_id()
        self._scene = scene if scene is not None else starter_scene()
        self._project = generate_project(self._scene.snapshot(), self.app_id)
        logger.info("session_started", app_id=self.app_id, widgets=len(self._scene))

    @property
    def widgets(self) -> tuple[Widget, ...]:
        return self._scene.snapshot()

    @property
    def project(self) -> GeneratedProject:
        return self._project

    def _apply(self, operation: str, mutation: Callable[[WidgetScene], T]) -> T:
        with self._lock, LogContext(operation=operation):
            candidate = self._scene.copy()
            result = mutation(candidate)
            project = generate_project(candidate.snapshot(), self.app_id)
            self._scene, self._project = candidate, project
            logger.debug("scene_committed", widgets=len(candidate))
            return result

    def get_widget(self, widget_id: str) -> Widget:
        return self._scene.get(widget_id)

    def add_widget(
        self,
        widget_type: WidgetType,
        name: str | None = None,
        props: Mapping[str, Any] | None = None,
    ) -> Widget:
        return self._apply("add_widget", lambda scene: scene.add(widget_type, name=name, props=props))

    def update_widget(
        self,
        widget_id: str,
        name: str | None = None,
        props: Mapping[str, Any] | None = None,
    ) -> Widget:
        def mutate(scene: WidgetScene) -> Widget:
            widget = scene.update_props(widget_id, props) if props else scene.get(widget_id)
            if name is not None:
                widget = scene.rename(widget_id, name)
            return widget

        return self._apply("update_widget", mutate)

    def remove_widget(self, widget_id: str) -> Widget:
        return self._apply("remove_widget", lambda scene: scene.remove(widget_id))

    def generate_layout(self, prompt: str) -> tuple[Widget, ...]:
        """
        Replace the scene with a generated layout.

        An empty result keeps the current scene.

        Raises:
            ValidationError: If the prompt is invalid
            LayoutGenerationError: If the generator fails
        """
        items = self.layout_generator.generate(prompt)
        if not items:
            logger.info("layout_empty")
            return self.widgets
        self._apply("generate_layout", lambda scene: scene.replace_all(items))
        return self.widgets

    def download(self) -> bytes:
        """Zip the current artifacts."""
        return build_archive(self._project)
