"""
Top-level package for the Service Hub API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
