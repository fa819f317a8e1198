"""Generate both build artifacts from one scene snapshot."""

from collections.abc import Sequence
from dataclasses import dataclass

from zeppbuilder.core import get_logger
from zeppbuilder.widgets import Widget
from .features import detect_features
from .manifest import generate_app_json
from .page import generate_page_script


logger = get_logger(__name__)

PAGE_SCRIPT_PATH = "page/index.js"
MANIFEST_PATH = "app.json"


@dataclass(frozen=True)
class GeneratedProject:
    """The two text artifacts of a generation pass."""

    page_script: str
    app_json: str

    def files(self) -> dict[str, str]:
        """Artifact text keyed by its path inside the project."""
        return {MANIFEST_PATH: self.app_json, PAGE_SCRIPT_PATH: self.page_script}


def generate_project(widgets: Sequence[Widget], app_id: int) -> GeneratedProject:
    """
    Run one generation pass.

    Features are computed once and shared by both assemblers.

    Raises:
        UnsupportedWidgetError: If a widget has no emission rule
    """
    snapshot = tuple(widgets)
    features = detect_features(snapshot)
    project = GeneratedProject(
        page_script=generate_page_script(snapshot, features),
        app_json=generate_app_json(snapshot, app_id, features),
    )
    logger.debug(
        "project_generated",
        widgets=len(snapshot),
        permissions=features.permissions,
        script_length=len(project.page_script),
    )
    return project
