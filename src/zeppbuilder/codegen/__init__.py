"""
Code generation for the Zepp OS runtime.
Widget scene -> page/index.js and app.json.
"""

from .encoders import circle_geometry, encode_color, encode_number, encode_string
from .emitters import UnsupportedWidgetError, emit_widget
from .features import SceneFeatures, detect_features, has_type
from .manifest import AppManifest, AppIdSource, RandomAppIdSource, build_manifest, generate_app_json
from .page import generate_page_script
from .project import GeneratedProject, generate_project, MANIFEST_PATH, PAGE_SCRIPT_PATH

__all__ = [
    "circle_geometry",
    "encode_color",
    "encode_number",
    "encode_string",
    "UnsupportedWidgetError",
    "emit_widget",
    "SceneFeatures",
    "detect_features",
    "has_type",
    "AppManifest",
    "AppIdSource",
    "RandomAppIdSource",
    "build_manifest",
    "generate_app_json",
    "generate_page_script",
    "GeneratedProject",
    "generate_project",
    "MANIFEST_PATH",
    "PAGE_SCRIPT_PATH",
]
