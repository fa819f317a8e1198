"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from zeppbuilder.handlers import BuilderHandler
from zeppbuilder.layout import LayoutGenerator
from zeppbuilder.models import GeminiConfig, ModelLoader, ModelLoadError
from zeppbuilder.widgets import WidgetScene, starter_scene
from .config import Settings, get_settings
from .id import UlidIdGenerator
from .logging_config import get_logger


logger = get_logger(__name__)


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @provider
    def provide_scene(self) -> WidgetScene:
        """Starter scene with ULID widget ids."""
        return starter_scene(UlidIdGenerator())

    @singleton
    @provider
    def provide_layout_generator(self, settings: Settings) -> LayoutGenerator:
        """Layout generator; runs without a model when no API key is configured."""
        config = GeminiConfig(
            model_name=settings.gemini_model,
            api_key=settings.gemini_api_key or None,
            temperature=settings.gemini_temperature,
            max_tokens=settings.gemini_max_tokens,
        )
        try:
            model = ModelLoader.load(config)
        except ModelLoadError as e:
            logger.warning("model_unavailable", error=str(e))
            model = None
        return LayoutGenerator(model=model, max_prompt_length=settings.max_prompt_length)

    @singleton
    @provider
    def provide_builder(self, layout_generator: LayoutGenerator, scene: WidgetScene) -> BuilderHandler:
        return BuilderHandler(layout_generator=layout_generator, scene=scene)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
