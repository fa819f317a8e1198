"""Layout Generator - natural language to widget layout via Gemini."""

from typing import Any, Protocol

import pydantic

from zeppbuilder.core import JSONParseError, LayoutRequest, ValidationError, get_logger
from zeppbuilder.core.validate import MAX_PROMPT_LENGTH
from zeppbuilder.widgets import LayoutItem
from .parser import parse_layout
from .prompt import RESPONSE_SCHEMA, SYSTEM_PROMPT


logger = get_logger(__name__)


class LayoutGenerationError(Exception):
    """The layout collaborator failed (credentials, network, bad output)."""
    pass


class JSONModel(Protocol):
    """Anything that turns a prompt into JSON text."""

    def generate_json(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: dict[str, Any] | None = None,
    ) -> str:
        ...


class LayoutGenerator:
    """Generates widget layouts from free-text prompts."""

    def __init__(self, model: JSONModel | None = None, max_prompt_length: int | None = None) -> None:
        self.model = model
        self.max_prompt_length = max_prompt_length
        logger.info("initialized", mode="llm" if model is not None else "disabled")

    def validate_request(self, prompt: str) -> LayoutRequest:
        """
        Raises:
            ValidationError: If the prompt is empty or too long
        """
        try:
            request = LayoutRequest(prompt=prompt)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid prompt: {e.errors()[0]['msg']}") from e
        limit = self.max_prompt_length if self.max_prompt_length is not None else MAX_PROMPT_LENGTH
        if len(request.prompt) > limit:
            raise ValidationError(f"Prompt exceeds {limit} characters")
        return request

    def generate(self, prompt: str) -> list[LayoutItem]:
        """
        Generate layout items for a prompt. Items carry no ids yet.

        Raises:
            ValidationError: If the prompt is invalid
            LayoutGenerationError: If the model is unavailable or its output unusable
        """
        request = self.validate_request(prompt)

        if self.model is None:
            logger.error("model_unavailable")
            raise LayoutGenerationError("API Key missing")

        logger.info("layout_generate", prompt=request.prompt[:50])
        try:
            raw = self.model.generate_json(request.prompt, SYSTEM_PROMPT, RESPONSE_SCHEMA)
        except Exception as e:
            logger.error("layout_model_failed", error=str(e))
            raise LayoutGenerationError(f"Model call failed: {e}") from e

        try:
            items = parse_layout(raw)
        except (JSONParseError, ValidationError) as e:
            logger.error("layout_parse_failed", error=str(e), content_preview=(raw or "")[:200])
            raise LayoutGenerationError(f"Unusable layout: {e}") from e

        logger.info("layout_generated", widgets=len(items))
        return items
