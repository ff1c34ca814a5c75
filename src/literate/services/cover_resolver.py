"""Cover resolution - maps a book's cover reference to an image."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtGui import QPixmap

logger = logging.getLogger(__name__)

DEFAULT_COVERS_DIR = Path(__file__).resolve().parent.parent / "ui" / "assets" / "covers"


class CoverResolver(ABC):
    """
    Capability interface for turning a cover reference into an image.

    Implementations must never raise for a bad reference: returning None
    tells the UI to draw its placeholder instead.
    """

    @abstractmethod
    def resolve_cover_asset(self, reference: Optional[str]) -> Optional[QPixmap]:
        """
        Resolve a cover reference.

        Args:
            reference: Asset name stored on the book (may be None or empty).

        Returns:
            A loaded QPixmap, or None when the cover is unavailable.
        """
        pass


class AssetCoverResolver(CoverResolver):
    """Loads covers from image files in an assets directory.

    Lookup: <assets_dir>/<reference>.<ext> for each extension in EXTENSIONS.
    Results (including misses) are memoized per reference.
    """

    EXTENSIONS = ("png", "jpg", "jpeg")

    def __init__(self, assets_dir: Optional[Path] = None) -> None:
        self.assets_dir = Path(assets_dir) if assets_dir else DEFAULT_COVERS_DIR
        self._cache: Dict[str, Optional[QPixmap]] = {}

    def resolve_cover_asset(self, reference: Optional[str]) -> Optional[QPixmap]:
        if not reference or not reference.strip():
            return None
        if reference in self._cache:
            return self._cache[reference]

        pixmap = self._load(reference)
        self._cache[reference] = pixmap
        return pixmap

    def find_asset_path(self, reference: str) -> Optional[Path]:
        """Return the first existing file for the reference, if any."""
        for ext in self.EXTENSIONS:
            candidate = self.assets_dir / f"{reference}.{ext}"
            if candidate.is_file():
                return candidate
        return None

    def clear_cache(self) -> None:
        self._cache.clear()

    def _load(self, reference: str) -> Optional[QPixmap]:
        path = self.find_asset_path(reference)
        if path is None:
            logger.debug("No cover asset for %r in %s", reference, self.assets_dir)
            return None

        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            logger.debug("Cover asset could not be decoded: %s", path)
            return None
        return pixmap
