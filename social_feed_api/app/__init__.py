"""
Application package initializer.

The project is split into small pieces: ``core`` holds configuration,
logging, the SQLite store and password hashing; ``services`` holds the
account, feed and comment logic; ``schemas`` defines request and
response bodies; and ``api`` exposes one endpoint per operation.
"""

from .main import app  # noqa: F401
