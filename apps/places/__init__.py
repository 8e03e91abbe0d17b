"""Places app package.

Listings owned by users: creation, owner-only full updates, lookup,
free-text search and photo uploads.
"""
