"""
Model configuration with strong typing.
Settings for the Gemini API used by layout generation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GeminiModelName(str, Enum):
    """Known Gemini model variants."""

    FLASH = "gemini-2.0-flash"  # Default: fast, JSON mode capable
    FLASH_LITE = "gemini-2.0-flash-lite"
    PRO = "gemini-1.5-pro"


class GeminiConfig(BaseModel):
    """Type-safe Gemini API configuration; the key is resolved by `Settings`."""

    model_config = ConfigDict(frozen=True, use_enum_values=True, protected_namespaces=())

    model_name: str = Field(default=GeminiModelName.FLASH.value)
    api_key: str | None = Field(default=None)

    # Generation parameters
    temperature: float = Field(default=0.4, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, ge=1, le=8192)
    top_p: float = Field(default=0.95, ge=0.0, le=1.0)
    top_k: int = Field(default=40, ge=1, le=100)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)
