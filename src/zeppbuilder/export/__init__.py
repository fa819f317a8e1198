"""Project export (zip download)."""

from .archive import ExportError, build_archive
from .readme import README_PATH, generate_readme

__all__ = ["ExportError", "build_archive", "README_PATH", "generate_readme"]
