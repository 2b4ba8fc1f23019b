"""
Pydantic schema definitions for API payloads and service results.

Request and response bodies keep the field names the existing client
sends and reads (``nombre``, ``usuario_id``, ``contenido``...).  The
services return their own records with English field names; the
endpoint modules translate between the two.
"""
