"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings and logging), ``schemas`` (pydantic
payloads), ``services`` (the in‑memory contact store) and ``api``
(versioned routers that map HTTP requests onto store operations).
"""

from .main import app  # noqa: F401
