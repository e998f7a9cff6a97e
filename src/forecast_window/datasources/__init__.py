"""Forecast page data sources.

Each subdirectory is one source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs, labels, page retrieval
    └── {feature}.py      # Extraction into a forecast Window

A source's job ends at producing a fresh ``Window`` of exactly
``window_days`` slots, starting at today. Trimming, merging and
persistence live in ``window/``, ``store.py`` and ``flows/``.

Failures are raised, never swallowed: ``FetchError`` when the page
cannot be retrieved, ``ParseError`` when its layout is not recognised.
"""
