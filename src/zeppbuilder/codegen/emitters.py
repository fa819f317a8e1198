"""Per-type emitters: one widget -> one `hmUI.createWidget(...)` fragment.

Fragments are unindented; the page assembler places them inside `build()`.
"""

from typing import assert_never

from zeppbuilder.widgets import TODOIST_TASKS_URL, Widget, WidgetType
from .encoders import (
    circle_geometry,
    encode_color_or,
    encode_number,
    encode_string,
)


Field = tuple[str, str]

SCROLL_LIST_ITEM_CONFIG = """[
  {
    type_id: 1,
    item_bg_color: 0x333333,
    item_bg_radius: 10,
    text_view: [{ x: 50, y: 0, w: 200, h: 50, key: 'name', color: 0xffffff, text_size: 24 }],
    text_view_count: 1,
    image_view: [{ x: 10, y: 10, w: 30, h: 30, key: 'icon' }],
    image_view_count: 1
  }
]"""


class UnsupportedWidgetError(Exception):
    """Widget variant has no emission rule."""

    def __init__(self, widget: Widget) -> None:
        super().__init__(f"No emission rule for {widget.type.value} widget '{widget.id}'")
        self.widget_type = widget.type
        self.widget_id = widget.id


def _indent_tail(value: str, prefix: str = "  ") -> str:
    head, *tail = value.split("\n")
    return "\n".join([head, *(prefix + line for line in tail)])


def _comment_text(value: str) -> str:
    """Text safe inside a `/* */` block comment."""
    return value.replace("*/", "*\\/")


def _handler(params: str, statement: str) -> str:
    return f"({params}) => {{\n  {statement}\n}}"


def render_create_widget(kind: str, fields: list[Field]) -> str:
    """`hmUI.createWidget(hmUI.widget.KIND, { ... });` with one field per line."""
    body = ",\n".join(f"  {key}: {_indent_tail(value)}" for key, value in fields)
    return f"hmUI.createWidget(hmUI.widget.{kind}, {{\n{body}\n}});"


def _box(widget: Widget) -> list[Field]:
    p = widget.props
    return [
        ("x", encode_number(p.x)),
        ("y", encode_number(p.y)),
        ("w", encode_number(p.w)),
        ("h", encode_number(p.h)),
    ]


def emit_text(widget: Widget) -> str:
    p = widget.props
    return render_create_widget("TEXT", [
        *_box(widget),
        ("text", encode_string(p.text or "")),
        ("text_size", encode_number(p.text_size if p.text_size is not None else 36)),
        ("color", encode_color_or(p.color, "0xffffff")),
        ("align_h", "hmUI.align.CENTER_H"),
        ("align_v", "hmUI.align.CENTER_V"),
    ])


def emit_button(widget: Widget) -> str:
    p = widget.props
    return render_create_widget("BUTTON", [
        *_box(widget),
        ("text", encode_string(p.text or "")),
        ("text_size", encode_number(p.text_size if p.text_size is not None else 30)),
        ("normal_color", encode_color_or(p.normal_color, "0x262626")),
        ("press_color", encode_color_or(p.press_color, "0x1a1a1a")),
        ("radius", encode_number(p.radius if p.radius is not None else 12)),
        ("click_func", _handler("", f"console.log({encode_string(f'Button {widget.name} clicked')});")),
    ])


def emit_circle(widget: Widget) -> str:
    center_x, center_y, radius = circle_geometry(widget.props)
    return render_create_widget("CIRCLE", [
        ("center_x", encode_number(center_x)),
        ("center_y", encode_number(center_y)),
        ("radius", encode_number(radius)),
        ("color", encode_color_or(widget.props.color, "0xff0000")),
    ])


def emit_rect(widget: Widget) -> str:
    p = widget.props
    return render_create_widget("FILL_RECT", [
        *_box(widget),
        ("color", encode_color_or(p.color, "0xff0000")),
        ("radius", encode_number(p.radius if p.radius is not None else 0)),
    ])


def emit_voice_button(widget: Widget) -> str:
    p = widget.props
    return render_create_widget("BUTTON", [
        *_box(widget),
        ("text", encode_string("MIC")),
        ("text_size", "24"),
        ("normal_color", encode_color_or(p.normal_color, "0xef4444")),
        ("press_color", "0x991b1b"),
        ("radius", encode_number(p.w / 2)),
        ("click_func", _handler("", "this.startVoiceInput();")),
    ])


def emit_todo_list(widget: Widget) -> str:
    endpoint = widget.props.api_endpoint or TODOIST_TASKS_URL
    comment = f"/*\n * TODO LIST WIDGET\n * API: {_comment_text(endpoint)}\n */"
    call = render_create_widget("SCROLL_LIST", [
        *_box(widget),
        ("item_space", "10"),
        ("item_config", SCROLL_LIST_ITEM_CONFIG),
        ("item_config_count", "1"),
        ("data_array", "this.state.tasks.length ? this.state.tasks : [{ name: 'Connect to API', icon: '' }]"),
        ("data_count", "this.state.tasks.length || 1"),
        ("item_click_func", _handler("list, index", 'console.log("Task clicked", index);')),
    ])
    return f"{comment}\n{call}"


def emit_widget(widget: Widget) -> str:
    """Dispatch on the widget variant.

    Raises:
        UnsupportedWidgetError: For IMG, which has no emission rule
    """
    match widget.type:
        case WidgetType.TEXT:
            return emit_text(widget)
        case WidgetType.BUTTON:
            return emit_button(widget)
        case WidgetType.CIRCLE:
            return emit_circle(widget)
        case WidgetType.RECT:
            return emit_rect(widget)
        case WidgetType.VOICE_BUTTON:
            return emit_voice_button(widget)
        case WidgetType.TODO_LIST:
            return emit_todo_list(widget)
        case WidgetType.IMG:
            raise UnsupportedWidgetError(widget)
        case _:
            assert_never(widget.type)


__all__ = [
    "UnsupportedWidgetError",
    "emit_widget",
    "emit_text",
    "emit_button",
    "emit_circle",
    "emit_rect",
    "emit_voice_button",
    "emit_todo_list",
    "render_create_widget",
]
