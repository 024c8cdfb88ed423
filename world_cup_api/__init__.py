"""
Top‑level package for the World Cup Winners API.

This file makes ``world_cup_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``world_cup_api.app.main``.  The bundled winners list lives in the
``data`` directory next to this file.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
