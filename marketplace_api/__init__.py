"""
Marketplace API root package.

This package contains the FastAPI app entry point (main.py), the users and
favorites API, domain models, MongoDB infrastructure, and the presentation
helpers (client configuration, product card) used by the catalog front end.
"""
