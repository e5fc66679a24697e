"""
Top-level package for the CRUD Demo API server.

All functionality lives in submodules under ``app``; the companion
HTTP client is the ``crud_demo_client`` module.
"""

__all__ = []
