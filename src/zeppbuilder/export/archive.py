"""Project archive - zip the generated artifacts for download."""

import io
import zipfile

from zeppbuilder.codegen import GeneratedProject
from zeppbuilder.core import get_logger
from .readme import README_PATH, generate_readme


logger = get_logger(__name__)


class ExportError(Exception):
    """Archive could not be produced."""
    pass


def build_archive(project: GeneratedProject, readme: str | None = None) -> bytes:
    """
    Zip `app.json`, `page/index.js` and `README.md`.

    Raises:
        ExportError: If the archive cannot be written
    """
    files = {**project.files(), README_PATH: readme if readme is not None else generate_readme()}
    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path in sorted(files):
                archive.writestr(path, files[path].encode("utf-8"))
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        logger.error("archive_failed", error=str(e))
        raise ExportError(f"Failed to build archive: {e}") from e

    data = buffer.getvalue()
    logger.info("archive_built", files=len(files), size=len(data))
    return data
