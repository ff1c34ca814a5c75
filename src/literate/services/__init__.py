"""Services layer - state, configuration, and platform integrations."""

from literate.services.book_store import BookStore
from literate.services.cover_resolver import AssetCoverResolver, CoverResolver
from literate.services.logging_setup import configure_logging
from literate.services.settings_manager import SettingsManager
from literate.services.share_service import ShareService

__all__ = [
    "BookStore",
    "CoverResolver",
    "AssetCoverResolver",
    "ShareService",
    "SettingsManager",
    "configure_logging",
]
