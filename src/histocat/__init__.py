"""histocat: localized historical-event catalogs for genealogy timelines.

The package serves ordered, language-tagged lists of historical events
rendered in the leveled ``N TAG value`` grammar understood by genealogy
engines (``1 EVEN`` / ``2 TYPE`` / ``2 DATE`` / ``2 NOTE`` / ``3 CONT``).
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "2025.12.29"
