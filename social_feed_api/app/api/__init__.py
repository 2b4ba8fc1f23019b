"""
HTTP layer.

``router.py`` aggregates the endpoint routers from ``endpoints`` and is
mounted by ``main.create_app`` under ``/api``.
"""
