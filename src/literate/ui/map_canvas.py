"""Map Canvas - Renders book locations on a Leaflet map using QWebEngineView."""

import json
import re
from pathlib import Path
from typing import Iterable, List, Optional

from PySide6.QtCore import QUrl, Signal
from PySide6.QtWebEngineCore import QWebEnginePage
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QVBoxLayout, QWidget

from literate.core import DEFAULT_REGION, Book, MapRegion

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "assets"

# Marker clicks navigate to literate://book/<id>
BOOK_LINK_SCHEME = "literate"
BOOK_LINK_HOST = "book"

_PLACEHOLDER = re.compile(r"\{(bounds_json|markers_json)\}")


def book_id_from_url(url: QUrl) -> Optional[str]:
    """Return the book id carried by a marker link, or None for other URLs."""
    if url.scheme() != BOOK_LINK_SCHEME or url.host() != BOOK_LINK_HOST:
        return None
    book_id = url.path().strip("/")
    return book_id or None


class MapPage(QWebEnginePage):
    """Web page that turns marker link navigations into a signal."""

    book_link_clicked = Signal(str)

    def acceptNavigationRequest(self, url, navigation_type, is_main_frame):
        book_id = book_id_from_url(QUrl(url))
        if book_id is not None:
            self.book_link_clicked.emit(book_id)
            return False
        return super().acceptNavigationRequest(url, navigation_type, is_main_frame)


class MapCanvas(QWidget):
    """Shows markers for located books inside the current region.

    The canvas only receives regions and coordinates; tiles, camera and
    marker drawing are delegated to Leaflet.

    Signals:
        book_selected: Emitted with the id of a clicked marker's book.
    """

    book_selected = Signal(str)

    def __init__(self):
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.web_view = QWebEngineView()
        self.page = MapPage(self.web_view)
        self.page.book_link_clicked.connect(self._on_book_link_clicked)
        self.web_view.setPage(self.page)
        layout.addWidget(self.web_view)

        self.region: MapRegion = DEFAULT_REGION
        self.markers: List[dict] = []
        self._rendered = False

    def update_map(self, books: Iterable[Book], region: Optional[MapRegion] = None) -> bool:
        """
        Show one marker per located book and, if given, move to the region.

        A None region keeps the current viewport. The page is reloaded only
        when the markers or the region actually change.

        Returns:
            True if the page was reloaded.
        """
        markers = self._markers_for(books)
        new_region = region if region is not None else self.region
        if self._rendered and markers == self.markers and new_region == self.region:
            return False

        self.markers = markers
        self.region = new_region
        self.web_view.setHtml(self._generate_html())
        self._rendered = True
        return True

    def _on_book_link_clicked(self, book_id: str):
        self.book_selected.emit(book_id)

    def _markers_for(self, books: Iterable[Book]) -> List[dict]:
        return [
            {
                "id": book.id,
                "title": book.title,
                "lat": book.location.latitude,
                "lon": book.location.longitude,
            }
            for book in books
            if book.has_location
        ]

    def _generate_html(self) -> str:
        """Fill the map template with the current region and markers."""
        template = self._load_template("map_template.html")
        values = {
            "bounds_json": json.dumps(list(self.region.bounds())),
            # Keep titles from closing the inline <script> block
            "markers_json": json.dumps(self.markers).replace("</", "<\\/"),
        }
        return _PLACEHOLDER.sub(lambda match: values[match.group(1)], template)

    def _load_template(self, filename: str) -> str:
        return (TEMPLATES_DIR / filename).read_text(encoding="utf-8")
