"""
Top‑level package for the laundry services site.

Marks ``laundry_site`` as a package so that modules within ``app`` can
be imported using fully qualified names like ``laundry_site.app.main``.
The static pages served by the application live in ``public/`` next to
this file.
"""

__all__ = []
