"""Widget Data Models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

Number = int | float


class WidgetType(str, Enum):
    """Closed set of widget variants."""

    TEXT = "TEXT"
    BUTTON = "BUTTON"
    IMG = "IMG"
    CIRCLE = "CIRCLE"
    RECT = "RECT"
    TODO_LIST = "TODO_LIST"
    VOICE_BUTTON = "VOICE_BUTTON"


class WidgetProps(BaseModel):
    """Style and geometry of a placed widget.

    Geometry is in device pixels and is not clamped to the canvas. Optional
    fields stay ``None`` when they do not apply; emitters fill in defaults.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    x: Number
    y: Number
    w: Number
    h: Number
    color: str | None = None

    # Text
    text: str | None = None
    text_size: Number | None = None

    # Button
    normal_color: str | None = None
    press_color: str | None = None
    radius: Number | None = None

    # Image placeholder
    src: str | None = None

    # Task list
    api_endpoint: str | None = None
    api_token_placeholder: str | None = None


class Widget(BaseModel):
    """One placed UI element."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique identifier")
    type: WidgetType
    name: str = Field(default="", description="Display label")
    props: WidgetProps


class LayoutItem(BaseModel):
    """A widget without identity, as produced by the layout generator."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: WidgetType
    name: str | None = None
    props: WidgetProps
