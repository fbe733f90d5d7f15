"""Core package initializer for histocat.

Holds the record contracts, the rendering strategies, the block renderer and
the grammar reader. Configuration and logging live in
``histocat.core.settings``.
"""

from __future__ import annotations

__all__ = ["__doc__"]
