# api/services/references/cross_references.py
"""
Cross-reference lookup from the Treasury of Scripture Knowledge datasets.

Two JSON files map lookup keys ("john_3_16") to ordered lists of display
references ("Romans 5:8", ...):

    {GOSPELPATH_DATA_PATH}/
    ├── cross-references-popular.json   (~100 common verses, checked first)
    └── cross-references.json           (full set, loaded on first miss)

Both files are loaded at most once per index instance and never reloaded.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from core import config

logger = logging.getLogger(__name__)


class CrossReferenceIndex:
    """
    Lazily-loaded, read-only cross-reference lookup.

    Usage:
        index = CrossReferenceIndex()
        refs = index.lookup("john_3_16")   # [] when the verse has none
    """

    def __init__(self, data_path: Optional[str] = None):
        self.data_path = Path(data_path or config.DATA_PATH)
        self._popular: Optional[dict] = None
        self._full: Optional[dict] = None

    @property
    def popular_path(self) -> Path:
        return self.data_path / config.POPULAR_CROSS_REFS_FILE

    @property
    def full_path(self) -> Path:
        return self.data_path / config.FULL_CROSS_REFS_FILE

    def _load(self, path: Path) -> dict:
        """Read a dataset file; a missing or corrupt file counts as empty."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Cross-reference file not found: {path}")
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
            logger.error(f"Failed to load cross-references from {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Cross-reference file {path} is not a JSON object")
            return {}

        logger.info(f"Loaded {len(data)} cross-reference entries from {path.name}")
        return data

    def popular(self) -> dict:
        if self._popular is None:
            self._popular = self._load(self.popular_path)
        return self._popular

    def full(self) -> dict:
        if self._full is None:
            self._full = self._load(self.full_path)
        return self._full

    def lookup(self, key: str) -> list:
        """
        Get cross-references for a lookup key.

        Args:
            key: Key from build_lookup_key(), e.g. "john_3_16"

        Returns:
            List of display reference strings, empty if none found
        """
        refs = self.popular().get(key)
        if refs:
            return list(refs)

        refs = self.full().get(key)
        if refs:
            return list(refs)

        return []

    def stats(self) -> dict:
        """Entry counts for the datasets loaded so far."""
        return {
            "popular_loaded": self._popular is not None,
            "popular_entries": len(self._popular or {}),
            "full_loaded": self._full is not None,
            "full_entries": len(self._full or {}),
        }
