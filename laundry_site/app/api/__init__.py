"""
HTTP layer of the site.

``router.py`` exposes a top‑level ``router`` that aggregates the
endpoint modules under ``endpoints``.
"""
