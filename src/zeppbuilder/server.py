"""
ZeppBuilder HTTP Service
Editor backend: scene mutations, layout generation, artifacts and download.
"""

import time
from typing import Any

import pydantic
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from zeppbuilder import __version__
from zeppbuilder.codegen import UnsupportedWidgetError
from zeppbuilder.core import Settings, ValidationError, configure_logging, create_container, get_logger, get_settings
from zeppbuilder.export import ExportError
from zeppbuilder.handlers import BuilderHandler
from zeppbuilder.layout import LayoutGenerationError
from zeppbuilder.widgets import WidgetNotFoundError, WidgetType


logger = get_logger(__name__)

LAYOUT_FAILURE = "Failed to generate layout. Check API Key."
DOWNLOAD_FAILURE = "Failed to generate download."


# Request/Response Models
class AddWidgetRequest(BaseModel):
    type: WidgetType
    name: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)


class UpdateWidgetRequest(BaseModel):
    name: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)


class LayoutPromptRequest(BaseModel):
    prompt: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(WidgetNotFoundError)
    async def not_found(request: Request, exc: WidgetNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(UnsupportedWidgetError)
    async def unsupported(request: Request, exc: UnsupportedWidgetError) -> JSONResponse:
        return _error(422, str(exc))

    @app.exception_handler(ValidationError)
    async def invalid(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(422, str(exc))

    @app.exception_handler(pydantic.ValidationError)
    async def invalid_props(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
        return _error(422, f"Invalid widget props: {exc.error_count()} error(s)")

    @app.exception_handler(LayoutGenerationError)
    async def layout_failed(request: Request, exc: LayoutGenerationError) -> JSONResponse:
        logger.error("layout_request_failed", error=str(exc))
        return _error(status.HTTP_502_BAD_GATEWAY, LAYOUT_FAILURE)

    @app.exception_handler(ExportError)
    async def export_failed(request: Request, exc: ExportError) -> JSONResponse:
        logger.error("download_failed", error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, DOWNLOAD_FAILURE)


def create_app(handler: BuilderHandler | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the HTTP app around one builder session."""
    settings = settings or get_settings()
    if handler is None:
        handler = create_container(settings).get(BuilderHandler)

    app = FastAPI(
        title="ZeppBuilder",
        description="Widget scene to Zepp OS project generator",
        version=__version__,
    )
    app.state.builder = handler

    # Enable CORS for the local editor
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    def dump_widgets() -> list[dict[str, Any]]:
        return [w.model_dump(mode="json", exclude_none=True) for w in handler.widgets]

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "version": __version__,
            "widgets": len(handler.widgets),
            "layout_model": handler.layout_generator.model is not None,
            "timestamp": time.time(),
        }

    @app.get("/widgets")
    async def list_widgets():
        return dump_widgets()

    @app.post("/widgets", status_code=status.HTTP_201_CREATED)
    async def add_widget(request: AddWidgetRequest):
        widget = handler.add_widget(request.type, name=request.name, props=request.props)
        return widget.model_dump(mode="json", exclude_none=True)

    @app.patch("/widgets/{widget_id}")
    async def update_widget(widget_id: str, request: UpdateWidgetRequest):
        widget = handler.update_widget(widget_id, name=request.name, props=request.props)
        return widget.model_dump(mode="json", exclude_none=True)

    @app.delete("/widgets/{widget_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def remove_widget(widget_id: str):
        handler.remove_widget(widget_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.post("/layout")
    def generate_layout(request: LayoutPromptRequest):
        # Sync route: the model call blocks and runs in the threadpool
        handler.generate_layout(request.prompt)
        return dump_widgets()

    @app.get("/artifacts/page")
    async def page_script():
        return Response(content=handler.project.page_script, media_type="application/javascript")

    @app.get("/artifacts/manifest")
    async def manifest():
        return Response(content=handler.project.app_json, media_type="application/json")

    @app.get("/download")
    async def download():
        return Response(
            content=handler.download(),
            media_type="application/zip",
            headers={"Content-Disposition": f'attachment; filename="{settings.archive_name}"'},
        )

    return app


def main() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    logger.info("starting", host=settings.host, port=settings.port)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
