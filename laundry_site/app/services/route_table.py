"""
Mapping from URL paths to files in the public directory.

Page routes are a fixed table.  Static assets are whitelisted by name:
any path that starts with one of ``STATIC_ASSETS`` is passed through to
the public directory unchanged.  Everything else resolves to ``None``
and is answered with the 404 page by the dispatcher.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

ROUTES: Dict[str, str] = {
    "/": "home.html",
    "/home": "home.html",
    "/about": "about.html",
    "/contact": "contact.html",
    "/services": "services.html",
}

STATIC_ASSETS: Tuple[str, ...] = ("/styles.css", "/script.js")

NOT_FOUND_PAGE = "404.html"

logger = logging.getLogger(__name__)


class RouteTable:
    """Resolve request paths against a public directory.

    The table is built once at startup and never mutated, so a single
    instance is shared by all requests.
    """

    def __init__(self, public_dir: Path, routes: Optional[Dict[str, str]] = None) -> None:
        self.public_dir = Path(public_dir).resolve()
        self._routes = dict(routes if routes is not None else ROUTES)

    @property
    def not_found_path(self) -> Path:
        return self.public_dir / NOT_FOUND_PAGE

    def resolve(self, url_path: str) -> Optional[Path]:
        """Return the file to serve for ``url_path`` or ``None``.

        Only the path component is considered; callers strip the query
        string.  A whitelisted asset path that would escape the public
        directory (``/styles.css/../../etc/passwd``) does not match.
        """
        file_name = self._routes.get(url_path)
        if file_name is not None:
            return self.public_dir / file_name

        if url_path.startswith(STATIC_ASSETS):
            candidate = (self.public_dir / url_path.lstrip("/")).resolve()
            if candidate == self.public_dir or self.public_dir not in candidate.parents:
                logger.warning("Rejected path outside public directory: %s", url_path)
                return None
            return candidate

        return None
