"""Per-type emitter tests."""

import pytest

from zeppbuilder.codegen import UnsupportedWidgetError, emit_widget, generate_page_script
from zeppbuilder.widgets import Widget, WidgetProps, WidgetType


def make_widget(widget_type: WidgetType, name: str = "Widget", **props) -> Widget:
    geometry = {"x": 10, "y": 20, "w": 100, "h": 50}
    geometry.update(props)
    return Widget(id="w-1", type=widget_type, name=name, props=WidgetProps(**geometry))


# ============================================================================
# TEXT
# ============================================================================

@pytest.mark.unit
def test_text_defaults():
    """TEXT without color and size gets white, 36."""
    assert emit_widget(make_widget(WidgetType.TEXT)) == (
        "hmUI.createWidget(hmUI.widget.TEXT, {\n"
        "  x: 10,\n"
        "  y: 20,\n"
        "  w: 100,\n"
        "  h: 50,\n"
        '  text: "",\n'
        "  text_size: 36,\n"
        "  color: 0xffffff,\n"
        "  align_h: hmUI.align.CENTER_H,\n"
        "  align_v: hmUI.align.CENTER_V\n"
        "});"
    )


@pytest.mark.unit
def test_text_explicit_values():
    code = emit_widget(make_widget(WidgetType.TEXT, text="10:09", text_size=72, color="#3e8bf3"))
    assert 'text: "10:09",' in code
    assert "text_size: 72," in code
    assert "color: 0x3e8bf3," in code


@pytest.mark.unit
def test_text_escapes_quotes():
    code = emit_widget(make_widget(WidgetType.TEXT, text='say "hi"'))
    assert 'text: "say \\"hi\\"",' in code


# ============================================================================
# BUTTON
# ============================================================================

@pytest.mark.unit
def test_button_defaults():
    code = emit_widget(make_widget(WidgetType.BUTTON, name="Start"))
    assert code.startswith("hmUI.createWidget(hmUI.widget.BUTTON, {\n")
    assert "text_size: 30," in code
    assert "normal_color: 0x262626," in code
    assert "press_color: 0x1a1a1a," in code
    assert "radius: 12," in code


@pytest.mark.unit
def test_button_click_handler_logs_name():
    code = emit_widget(make_widget(WidgetType.BUTTON, name="Start"))
    assert code.endswith(
        "  click_func: () => {\n"
        '    console.log("Button Start clicked");\n'
        "  }\n"
        "});"
    )


@pytest.mark.unit
def test_button_zero_radius_is_kept():
    code = emit_widget(make_widget(WidgetType.BUTTON, radius=0))
    assert "radius: 0," in code


# ============================================================================
# Shapes
# ============================================================================

@pytest.mark.unit
def test_circle_geometry_derivation():
    widget = make_widget(WidgetType.CIRCLE, x=100, y=100, w=60, h=60)
    assert emit_widget(widget) == (
        "hmUI.createWidget(hmUI.widget.CIRCLE, {\n"
        "  center_x: 130,\n"
        "  center_y: 130,\n"
        "  radius: 30,\n"
        "  color: 0xff0000\n"
        "});"
    )


@pytest.mark.unit
def test_rect_defaults():
    code = emit_widget(make_widget(WidgetType.RECT))
    assert code.startswith("hmUI.createWidget(hmUI.widget.FILL_RECT, {\n")
    assert "color: 0xff0000,\n" in code
    assert "radius: 0\n" in code


@pytest.mark.unit
def test_rect_corner_radius():
    code = emit_widget(make_widget(WidgetType.RECT, color="#00ff00", radius=8))
    assert "color: 0x00ff00," in code
    assert "radius: 8\n" in code


# ============================================================================
# VOICE_BUTTON
# ============================================================================

@pytest.mark.unit
def test_voice_button():
    code = emit_widget(make_widget(WidgetType.VOICE_BUTTON, w=64, h=64))
    assert 'text: "MIC",' in code
    assert "normal_color: 0xef4444," in code
    assert "press_color: 0x991b1b," in code
    assert "radius: 32," in code
    assert "this.startVoiceInput();" in code


@pytest.mark.unit
def test_voice_button_press_color_is_fixed():
    code = emit_widget(make_widget(WidgetType.VOICE_BUTTON, normal_color="#123456", press_color="#ffffff"))
    assert "normal_color: 0x123456," in code
    assert "press_color: 0x991b1b," in code


# ============================================================================
# TODO_LIST
# ============================================================================

@pytest.mark.unit
def test_todo_list_default_endpoint_comment():
    code = emit_widget(make_widget(WidgetType.TODO_LIST))
    assert code.startswith("/*\n * TODO LIST WIDGET\n * API: https://api.todoist.com/rest/v2/tasks\n */\n")
    assert "hmUI.createWidget(hmUI.widget.SCROLL_LIST, {" in code


@pytest.mark.unit
def test_todo_list_configured_endpoint():
    code = emit_widget(make_widget(WidgetType.TODO_LIST, api_endpoint="https://example.test/tasks"))
    assert " * API: https://example.test/tasks\n" in code
    assert "todoist" not in code


@pytest.mark.unit
def test_todo_list_endpoint_cannot_close_comment():
    endpoint = "https://a.test/*/x */ hmUI.doEvil(); /*"
    code = emit_widget(make_widget(WidgetType.TODO_LIST, api_endpoint=endpoint))

    assert " * API: https://a.test/*\\/x *\\/ hmUI.doEvil(); /*\n */\n" in code
    # Only the closing line ends the comment
    assert code.count("*/") == 1
    assert "*/ hmUI.doEvil();" not in code


@pytest.mark.unit
def test_todo_list_endpoint_stays_verbatim_in_fetch_url(scene):
    endpoint = "https://a.test/*/x"
    scene.add(WidgetType.TODO_LIST, props={"api_endpoint": endpoint})
    script = generate_page_script(scene.snapshot())

    assert 'const url = "https://a.test/*/x";' in script
    assert " * API: https://a.test/*\\/x\n" in script


@pytest.mark.unit
def test_todo_list_click_logs_index():
    code = emit_widget(make_widget(WidgetType.TODO_LIST))
    assert "item_click_func: (list, index) => {" in code
    assert 'console.log("Task clicked", index);' in code
    assert "data_array: this.state.tasks" in code


# ============================================================================
# Unsupported
# ============================================================================

@pytest.mark.unit
def test_img_is_unsupported():
    widget = make_widget(WidgetType.IMG, src="logo.png")
    with pytest.raises(UnsupportedWidgetError) as exc_info:
        emit_widget(widget)
    assert exc_info.value.widget_type is WidgetType.IMG
    assert exc_info.value.widget_id == "w-1"
