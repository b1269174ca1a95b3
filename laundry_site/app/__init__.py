"""
Application package initializer.

The package is split into ``core`` (configuration and logging),
``schemas`` (pydantic models), ``services`` (routing, file serving and
the cart widget logic) and ``api`` (the FastAPI routers that expose the
site over HTTP).
"""

from .main import app  # noqa: F401
