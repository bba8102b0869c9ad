"""HTTP surface: the function-name dispatcher and the standalone tool endpoints."""

from toolbelt.api.main import app

__all__ = ['app']
