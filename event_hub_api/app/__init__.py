"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  ``core`` holds configuration, logging, the in-memory
entity store and the relation resolver; ``services`` wraps the store
with one service per entity kind; ``api`` exposes the services as
versioned HTTP routes under ``api/<version>/``.
"""

from .main import app  # noqa: F401
