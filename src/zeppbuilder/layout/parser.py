"""Layout Parser - model output to validated layout items.

Generated items go through the same `WidgetProps` model as editor input.
"""

from typing import Any

import pydantic
from returns.result import Failure, Result, Success

from zeppbuilder.core import ValidationError, ValidationResult, extract_json_array, get_logger
from zeppbuilder.core.validate import MAX_LAYOUT_ITEMS
from zeppbuilder.widgets import LayoutItem
from .prompt import LAYOUT_WIDGET_TYPES

logger = get_logger(__name__)


def validate_layout(data: list[Any]) -> Result[list[LayoutItem], ValidationResult]:
    """
    Validate raw layout items (Result pattern).

    Args:
        data: Decoded JSON array

    Returns:
        Success with items in input order, or the first validation failure
    """
    if len(data) > MAX_LAYOUT_ITEMS:
        return Failure(ValidationResult(f"Layout has {len(data)} items, maximum is {MAX_LAYOUT_ITEMS}"))

    items = []
    for index, raw in enumerate(data):
        try:
            item = LayoutItem.model_validate(raw)
        except pydantic.ValidationError as e:
            return Failure(ValidationResult(f"Invalid layout item {index}: {e}", field=f"[{index}]", value=raw))
        if item.type not in LAYOUT_WIDGET_TYPES:
            return Failure(ValidationResult(
                f"Unsupported widget type in layout: {item.type.value}",
                field=f"[{index}].type",
                value=item.type.value,
            ))
        items.append(item)
    return Success(items)


def parse_layout(text: str | None) -> list[LayoutItem]:
    """
    Parse model output into layout items.

    Empty output means an empty layout.

    Raises:
        JSONParseError: If no JSON array can be decoded
        ValidationError: If an item does not match the widget schema
    """
    if not text or not text.strip():
        return []

    result = validate_layout(extract_json_array(text))
    if isinstance(result, Failure):
        error = result.failure()
        logger.warning("layout_invalid", error=error.message, field=error.field)
        raise ValidationError(error.message)
    return result.unwrap()
