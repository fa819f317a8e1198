"""Page Script Assembler - builds `page/index.js`."""

import textwrap
from collections.abc import Sequence

from zeppbuilder.widgets import Widget
from .emitters import emit_widget
from .encoders import encode_string
from .features import SceneFeatures, detect_features


DEFAULT_API_TOKEN = "YOUR_TODOIST_API_TOKEN"

HEADER = """/*
 * Generated by ZeppBuilder AI
 * Target Device: Amazfit Balance (480x480)
 * File: page/index.js
 */
"""

VOICE_HELPER = """// Voice input entry point (requires 'audio_record' permission in app.json)
startVoiceInput() {
  console.log("Starting voice input...");
  hmUI.showToast({ text: "Listening..." });
},"""


def fetch_helper(endpoint: str, token: str = DEFAULT_API_TOKEN) -> str:
    """`fetchTasks()` method issuing a GET to the task endpoint."""
    return f"""// Fetch tasks from the task API (requires 'internet' permission in app.json)
fetchTasks() {{
  const url = {encode_string(endpoint)};
  const token = {encode_string(token)};

  fetch({{
    url: url,
    method: 'GET',
    headers: {{
      'Authorization': 'Bearer ' + token
    }}
  }}).then((response) => {{
    // this.state.tasks = response.body.map(t => ({{ name: t.content, icon: '' }}));
  }}).catch((e) => console.log('Fetch error', e));
}},"""


def helper_blocks(features: SceneFeatures) -> list[str]:
    """Helper methods required by the scene, in a fixed order."""
    helpers = []
    if features.has_todo_list and features.tasks_endpoint is not None:
        helpers.append(fetch_helper(features.tasks_endpoint, features.api_token_placeholder or DEFAULT_API_TOKEN))
    if features.has_voice_button:
        helpers.append(VOICE_HELPER)
    return helpers


def generate_page_script(widgets: Sequence[Widget], features: SceneFeatures | None = None) -> str:
    """
    Assemble the complete page script.

    Widgets are emitted in sequence order. Identical input always yields
    identical text.

    Args:
        widgets: Scene snapshot
        features: Precomputed features (computed from widgets when omitted)

    Raises:
        UnsupportedWidgetError: If a widget has no emission rule
    """
    if features is None:
        features = detect_features(widgets)

    statements = [emit_widget(w) for w in widgets]
    if features.has_todo_list:
        statements.append("this.fetchTasks();")

    build_body = textwrap.indent("\n\n".join(statements), " " * 4)
    build = "  build() {\n" + (build_body + "\n" if build_body else "") + "  },\n"

    helpers = "".join("\n" + textwrap.indent(block, "  ") + "\n" for block in helper_blocks(features))

    return (
        f"{HEADER}\n"
        "Page({\n"
        "  state: {\n"
        "    tasks: []\n"
        "  },\n"
        "\n"
        f"{build}"
        "\n"
        "  onDestroy() {\n"
        "    // Cleanup\n"
        "  },\n"
        f"{helpers}"
        "});\n"
    )
