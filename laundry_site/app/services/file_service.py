"""
Serving files from disk with content type detection.

``FileService.serve_file`` reads the requested file in a worker thread
and builds the HTTP response.  A missing file falls back to the 404
page exactly once; if that page is missing too, or any other read error
occurs, a fixed 500 page is returned.  No error escapes to the caller.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from fastapi import Response, status
from fastapi.concurrency import run_in_threadpool

CONTENT_TYPES: Dict[str, str] = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".ico": "image/x-icon",
}

DEFAULT_CONTENT_TYPE = "text/plain"

INTERNAL_ERROR_BODY = "<h1>500 - Internal Server Error</h1>"
METHOD_NOT_ALLOWED_BODY = "<h1>405 - Method Not Allowed</h1>"

logger = logging.getLogger(__name__)


def get_content_type(file_path: Union[str, Path]) -> str:
    """Return the MIME type for ``file_path`` based on its extension."""
    return CONTENT_TYPES.get(Path(file_path).suffix, DEFAULT_CONTENT_TYPE)


def html_response(body: str, status_code: int) -> Response:
    return Response(content=body, status_code=status_code, media_type="text/html")


class FileService:
    """Read files and turn them into responses."""

    def __init__(self, not_found_path: Path) -> None:
        self.not_found_path = Path(not_found_path)

    @staticmethod
    async def read_file(file_path: Path) -> bytes:
        return await run_in_threadpool(Path(file_path).read_bytes)

    async def serve_file(self, file_path: Path, status_code: int = status.HTTP_200_OK) -> Response:
        """Respond with the contents of ``file_path``.

        The lookup is two steps: the requested file, then the 404 page.
        The second step never falls back again, so a missing 404 page
        ends in the generic 500 response.
        """
        try:
            content = await self.read_file(file_path)
        except FileNotFoundError:
            logger.warning("File not found: %s", file_path)
            return await self.serve_not_found()
        except OSError:
            logger.exception("Failed to read %s", file_path)
            return html_response(INTERNAL_ERROR_BODY, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return self._file_response(content, file_path, status_code)

    async def serve_not_found(self) -> Response:
        """Respond with the 404 page, or the 500 page if it cannot be read."""
        try:
            content = await self.read_file(self.not_found_path)
        except OSError:
            logger.exception("Failed to read 404 page %s", self.not_found_path)
            return html_response(INTERNAL_ERROR_BODY, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return self._file_response(content, self.not_found_path, status.HTTP_404_NOT_FOUND)

    @staticmethod
    def _file_response(content: bytes, file_path: Path, status_code: int) -> Response:
        return Response(content=content, status_code=status_code, media_type=get_content_type(file_path))
