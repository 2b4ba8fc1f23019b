"""
Endpoint modules.

Each module defines an APIRouter for one area (members, posts,
comments).  Handlers catch the service errors and answer with the
JSON envelope the client expects; list handlers answer ``[]`` when
the store fails.
"""
