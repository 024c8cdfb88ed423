"""
Application package initializer.

The service is split into two collaborating pieces: ``core`` holds the
configuration, logging, access token check and the JSON backed winners
store, while ``api`` holds the routers that dispatch HTTP requests to
the store.  ``schemas`` defines the payloads shared by both.
"""

from .main import app  # noqa: F401
