"""
HTTP layer of the Showcase API.

``router`` aggregates the endpoint modules in ``endpoints``; the
application mounts it under ``settings.api_prefix``.
"""
