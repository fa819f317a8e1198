"""Model Loader - Gemini API wrapper for JSON generation."""

from typing import Any

import google.generativeai as genai

from zeppbuilder.core import get_logger
from .config import GeminiConfig


logger = get_logger(__name__)


class ModelLoadError(Exception):
    """Model loading failed."""
    pass


class GeminiModel:
    """Gemini API wrapper producing JSON documents."""

    def __init__(self, config: GeminiConfig):
        if not config.has_api_key:
            raise ModelLoadError("API Key missing")

        self.config = config
        genai.configure(api_key=config.api_key)
        logger.info("model_configured", model=config.model_name)

    def generate_json(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        """Non-streaming generation constrained to a JSON response."""
        generation_config = genai.GenerationConfig(
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_tokens,
            top_p=self.config.top_p,
            top_k=self.config.top_k,
            response_mime_type="application/json",
            response_schema=response_schema,
        )
        model = genai.GenerativeModel(
            model_name=self.config.model_name,
            generation_config=generation_config,
            system_instruction=system_instruction,
        )
        try:
            response = model.generate_content(prompt)
            return response.text
        except Exception as e:
            logger.error("generate_error", error=str(e))
            raise


class ModelLoader:
    """Builds configured models; SDK failures surface as ModelLoadError."""

    @staticmethod
    def load(config: GeminiConfig) -> GeminiModel:
        """Load model with config."""
        logger.info("loading", model=config.model_name)
        try:
            model = GeminiModel(config)
        except ModelLoadError:
            raise
        except Exception as e:
            logger.error("load_failed", error=str(e))
            raise ModelLoadError(f"Failed to load {config.model_name}") from e
        return model
