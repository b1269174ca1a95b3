"""Shared fixtures: a throwaway public directory and clients bound to it."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from laundry_site.app.main import create_app

PAGES = {
    "home.html": "<h1>Home</h1>",
    "about.html": "<h1>About</h1>",
    "contact.html": "<h1>Contact</h1>",
    "services.html": "<h1>Services</h1>",
    "404.html": "<h1>Not Found</h1>",
    "styles.css": "body { color: #000; }",
    "script.js": "console.log('cart');",
}


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    root = tmp_path / "public"
    root.mkdir()
    for name, content in PAGES.items():
        (root / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def client(public_dir: Path) -> TestClient:
    return TestClient(create_app(public_dir))
