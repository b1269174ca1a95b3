"""Entry point for the laundry services web server.

Prints the startup banner with the available routes and serves the
site with Uvicorn.  Host and port come from the ``HOST`` and ``PORT``
environment variables (defaults ``0.0.0.0`` and ``3000``); see
``laundry_site/app/core/config.py`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging
from typing import List

from uvicorn import Config, Server

from laundry_site.app.core.config import settings
from laundry_site.app.main import app
from laundry_site.app.services.route_table import ROUTES

PAGE_TITLES = {
    "/home": "Home Page",
    "/about": "About Page",
    "/contact": "Contact Page",
    "/services": "Services Page",
}


def build_banner(port: int = settings.port) -> str:
    """Return the startup banner listing every page route."""
    rule = "=" * 50
    base_url = f"http://localhost:{port}"
    lines: List[str] = [
        rule,
        f"🧺 {settings.project_name}",
        rule,
        f"Server is running on {base_url}",
        "",
        "Available Routes:",
    ]
    for path in ROUTES:
        if path == "/":
            continue
        lines.append(f"  • {base_url + path:<35} - {PAGE_TITLES.get(path, path)}")
    lines.extend(["", "Press Ctrl+C to stop the server", rule])
    return "\n".join(lines)


def build_config() -> Config:
    # Requests are logged by the application middleware, not by uvicorn.
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


async def main() -> None:
    server = Server(build_config())
    print(build_banner(settings.port))
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
