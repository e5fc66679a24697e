"""
API package containing the HTTP routes.

``router.py`` aggregates the per-route modules from ``endpoints`` into
a single ``router`` which ``main.create_app`` includes.
"""
