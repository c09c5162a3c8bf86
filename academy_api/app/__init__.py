"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (trainers, courses) is split into an entity
model, a transport schema, a mapper between the two, a repository
that talks to SQLite and a service holding the business rules.  HTTP
routes live in ``api/v1/endpoints`` and are grouped per API version.
"""

from .main import app  # noqa: F401
