"""Manifest Assembler - builds `app.json`."""

import random
from collections.abc import Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from zeppbuilder.core import safe_json_dumps
from zeppbuilder.widgets import Widget
from .features import SceneFeatures, detect_features


APP_ID_MIN = 1_000_000
APP_ID_MAX = 1_999_999


class AppIdSource(Protocol):
    """Source of numeric application ids."""

    def new_app_id(self) -> int:
        ...


class RandomAppIdSource:
    """Random app ids in [1000000, 1999999]; seedable for reproducible runs."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def new_app_id(self) -> int:
        return self._random.randint(APP_ID_MIN, APP_ID_MAX)


class ManifestModel(BaseModel):
    """Serialized with camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AppVersion(ManifestModel):
    code: int = 1
    name: str = "1.0.0"


class AppConfig(ManifestModel):
    """Application identity."""

    app_id: int = Field(..., alias="appId")
    app_name: str = Field(default="My AI App", alias="appName")
    version: AppVersion = Field(default_factory=AppVersion)
    icon: str = "icon.png"
    vendor: str = "ZeppBuilder"
    description: str = "Generated by ZeppBuilder AI"


def _default_targets() -> dict[str, Any]:
    return {
        "all": {
            "module": {
                "page": {"pages": ["page/index"]},
                "app": {"js": "app"},
            }
        }
    }


class AppManifest(ManifestModel):
    """Complete `app.json` document."""

    config: AppConfig
    permissions: list[str] = Field(default_factory=list)
    targets: dict[str, Any] = Field(default_factory=_default_targets)


def build_manifest(
    widgets: Sequence[Widget],
    app_id: int,
    features: SceneFeatures | None = None,
) -> AppManifest:
    """Derive the manifest; permissions come from widget types only."""
    if features is None:
        features = detect_features(widgets)
    return AppManifest(config=AppConfig(app_id=app_id), permissions=features.permissions)


def generate_app_json(
    widgets: Sequence[Widget],
    app_id: int | None = None,
    features: SceneFeatures | None = None,
) -> str:
    """
    Render `app.json` with 2-space indentation.

    Args:
        widgets: Scene snapshot
        app_id: Application id; a random one is drawn when omitted
        features: Precomputed features (computed from widgets when omitted)
    """
    if app_id is None:
        app_id = RandomAppIdSource().new_app_id()
    manifest = build_manifest(widgets, app_id, features)
    return safe_json_dumps(manifest.model_dump(by_alias=True), indent=2)
