"""
Shared building blocks: settings, logging, the database handle, the
error taxonomy and password hashing.
"""
