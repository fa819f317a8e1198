"""HTTP service tests."""

import io
import zipfile
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from zeppbuilder.core import CounterIdGenerator, Settings
from zeppbuilder.handlers import BuilderHandler
from zeppbuilder.layout import LayoutGenerator
from zeppbuilder.server import create_app
from zeppbuilder.widgets import starter_scene


@pytest.fixture
def client(builder):
    app = create_app(handler=builder, settings=Settings(archive_name="watch.zip"))
    return TestClient(app)


@pytest.mark.unit
def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["widgets"] == 1
    assert body["layout_model"] is True


@pytest.mark.unit
def test_list_widgets(client):
    response = client.get("/widgets")
    assert response.status_code == 200
    (widget,) = response.json()
    assert widget["id"] == "w-1"
    assert widget["type"] == "TEXT"
    assert widget["props"]["text"] == "10:09"
    assert "src" not in widget["props"]


@pytest.mark.unit
def test_add_update_remove(client):
    response = client.post("/widgets", json={"type": "BUTTON", "name": "Go", "props": {"x": 20}})
    assert response.status_code == 201
    widget_id = response.json()["id"]
    assert response.json()["props"]["x"] == 20

    response = client.patch(f"/widgets/{widget_id}", json={"props": {"text": "Start"}})
    assert response.status_code == 200
    assert response.json()["props"]["text"] == "Start"
    assert 'text: "Start",' in client.get("/artifacts/page").text

    response = client.delete(f"/widgets/{widget_id}")
    assert response.status_code == 204
    assert len(client.get("/widgets").json()) == 1


@pytest.mark.unit
def test_unknown_widget_is_404(client):
    response = client.delete("/widgets/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Widget not found: missing"}


@pytest.mark.unit
def test_img_is_422(client):
    response = client.post("/widgets", json={"type": "IMG", "props": {"src": "logo.png"}})
    assert response.status_code == 422
    assert "IMG" in response.json()["error"]
    assert len(client.get("/widgets").json()) == 1


@pytest.mark.unit
def test_invalid_props_is_422(client):
    response = client.patch("/widgets/w-1", json={"props": {"x": "left"}})
    assert response.status_code == 422
    assert "error" in response.json()


@pytest.mark.unit
def test_layout(client):
    response = client.post("/layout", json={"prompt": "todo app with voice"})
    assert response.status_code == 200
    assert [w["type"] for w in response.json()] == ["TODO_LIST", "VOICE_BUTTON", "TEXT"]

    manifest = client.get("/artifacts/manifest")
    assert manifest.headers["content-type"].startswith("application/json")
    assert manifest.json()["permissions"] == ["internet", "audio_record"]


@pytest.mark.unit
def test_layout_empty_prompt_is_422(client):
    response = client.post("/layout", json={"prompt": "  "})
    assert response.status_code == 422


@pytest.mark.unit
def test_layout_failure_is_502():
    model = MagicMock()
    model.generate_json.side_effect = RuntimeError("bad key")
    handler = BuilderHandler(LayoutGenerator(model=model), scene=starter_scene(CounterIdGenerator()))
    client = TestClient(create_app(handler=handler, settings=Settings()))

    response = client.post("/layout", json={"prompt": "clock"})
    assert response.status_code == 502
    assert response.json() == {"error": "Failed to generate layout. Check API Key."}
    assert len(client.get("/widgets").json()) == 1


@pytest.mark.unit
def test_page_artifact(client):
    response = client.get("/artifacts/page")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/javascript")
    assert response.text.startswith("/*\n * Generated by ZeppBuilder AI\n")


@pytest.mark.unit
def test_download(client):
    response = client.get("/download")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert 'filename="watch.zip"' in response.headers["content-disposition"]
    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        assert "page/index.js" in archive.namelist()
