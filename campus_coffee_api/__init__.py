"""
Top‑level package for the Campus Coffee API.

This file makes ``campus_coffee_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``campus_coffee_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
