"""Value encoders: model values to Zepp OS JavaScript literals."""

import json
import math

from zeppbuilder.widgets import WidgetProps
from zeppbuilder.widgets.models import Number


def encode_color(hex_color: str) -> str:
    """`#RRGGBB` -> `0xRRGGBB`. Input is trusted, not validated."""
    return "0x" + hex_color.replace("#", "", 1)


def encode_color_or(hex_color: str | None, default: str) -> str:
    """Encode an optional color, falling back to an already-encoded literal."""
    return encode_color(hex_color) if hex_color is not None else default


def encode_number(value: Number) -> str:
    """Render a number the way JavaScript prints it (130, not 130.0)."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def encode_string(text: str) -> str:
    """Double-quoted JavaScript string literal."""
    return json.dumps(text, ensure_ascii=False)


def circle_geometry(props: WidgetProps) -> tuple[Number, Number, Number]:
    """Bounding box to (center_x, center_y, radius).

    The radius comes from the width only; a non-square box keeps its height
    for the vertical center and nothing else.
    """
    return (
        props.x + props.w / 2,
        props.y + props.h / 2,
        props.w / 2,
    )
