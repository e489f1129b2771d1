"""
Application package initializer.

The project is organised into logical pieces: ``core`` (configuration,
logging, persistence, identifiers and the application state),
``schemas`` (pydantic models), ``services`` (business logic per record
kind) and ``api`` (versioned HTTP routers).
"""

from .main import app  # noqa: F401
