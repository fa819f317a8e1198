"""Layout generation prompt and response schema."""

from zeppbuilder.widgets import CANVAS_SIZE, WidgetType

# IMG has no emission rule and is never offered to the model
LAYOUT_WIDGET_TYPES: tuple[WidgetType, ...] = (
    WidgetType.TEXT,
    WidgetType.BUTTON,
    WidgetType.CIRCLE,
    WidgetType.RECT,
    WidgetType.TODO_LIST,
    WidgetType.VOICE_BUTTON,
)

SYSTEM_PROMPT = f"""
You are an expert Zepp OS (Amazfit) developer.
The user will describe a watch face or app layout.
The screen resolution is {CANVAS_SIZE}x{CANVAS_SIZE} pixels.
Center of screen is x:{CANVAS_SIZE // 2}, y:{CANVAS_SIZE // 2}.

Available Widget Types:
1. TEXT (props: text, color, text_size)
2. BUTTON (props: text, normal_color, press_color, radius)
3. CIRCLE (props: color)
4. RECT (props: color, radius)
5. TODO_LIST (A vertical list of tasks. props: api_endpoint)
6. VOICE_BUTTON (A circular microphone button. props: normal_color)

If the user asks for "Todoist" or "Task Manager", use a TODO_LIST widget.
If the user asks for "Voice", "AI", or "Microphone", use a VOICE_BUTTON widget.

Colors are hex strings like "#3e8bf3".
Ensure elements are positioned logically within the {CANVAS_SIZE}x{CANVAS_SIZE} circle.
"""

_NUMBER = {"type": "NUMBER"}
_STRING = {"type": "STRING"}

RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "type": {
                "type": "STRING",
                "format": "enum",
                "enum": [t.value for t in LAYOUT_WIDGET_TYPES],
            },
            "name": _STRING,
            "props": {
                "type": "OBJECT",
                "properties": {
                    "x": _NUMBER,
                    "y": _NUMBER,
                    "w": _NUMBER,
                    "h": _NUMBER,
                    "text": _STRING,
                    "color": _STRING,
                    "normal_color": _STRING,
                    "press_color": _STRING,
                    "text_size": _NUMBER,
                    "radius": _NUMBER,
                    "api_endpoint": _STRING,
                },
                "required": ["x", "y", "w", "h"],
            },
        },
        "required": ["type", "props", "name"],
    },
}
