"""
Application package initializer.

The app is split into ``core`` (configuration, logging, errors),
``schemas`` (response models), ``services`` (validation and response
building) and ``api`` (route handlers).
"""

from .main import app  # noqa: F401
