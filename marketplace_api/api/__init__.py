"""
API layer for the Marketplace backend.

Exposes the users, authentication and favorites endpoints under /api/users
and the JSON error handlers shared by every route.
"""
