"""
Application package initializer.

The project is organised in layers: ``schemas`` holds the domain
model, ``ports`` the data‑access contracts, ``services`` the generic
CRUD logic built on those contracts, ``data`` the SQLite
implementation of the ports and ``api`` the versioned HTTP routes.
Each layer only depends on the ones listed before it.
"""

from .main import app  # noqa: F401
