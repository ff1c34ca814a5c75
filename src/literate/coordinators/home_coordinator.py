"""Home Coordinator - Drives the listings strip and map framing."""

from PySide6.QtCore import QObject, Slot

from literate.coordinators.book_detail_coordinator import BookDetailCoordinator
from literate.services import BookStore
from literate.ui import HomeScreen, MainWindow, MapCanvas


class HomeCoordinator(QObject):
    """
    Keeps the home screen and map in step with the store.

    The map is refitted around all located books when a book is added or
    removed. Flag changes leave the map alone. When no book has a location
    the previous viewport is kept.
    """

    def __init__(
        self,
        home_screen: HomeScreen,
        map_canvas: MapCanvas,
        book_store: BookStore,
        detail_coordinator: BookDetailCoordinator,
        main_window: MainWindow,
    ):
        super().__init__()

        if home_screen is None:
            raise ValueError("HomeScreen must not be None")
        if map_canvas is None:
            raise ValueError("MapCanvas must not be None")
        if book_store is None:
            raise ValueError("BookStore must not be None")
        if detail_coordinator is None:
            raise ValueError("BookDetailCoordinator must not be None")
        if main_window is None:
            raise ValueError("MainWindow must not be None")

        self.home_screen = home_screen
        self.map_canvas = map_canvas
        self.book_store = book_store
        self.detail_coordinator = detail_coordinator
        self.main_window = main_window

        self.home_screen.book_selected.connect(self.handle_book_selected)
        self.map_canvas.book_selected.connect(self.handle_book_selected)
        self.book_store.book_added.connect(self.handle_collection_changed)
        self.book_store.book_removed.connect(self.handle_collection_changed)

    def show_home(self):
        self.refresh()
        self.main_window.display_home_view()

    @Slot()
    def refresh(self):
        books = self.book_store.books()
        self.home_screen.display_listings(books)
        self.map_canvas.update_map(books, self.book_store.region_that_fits())

    @Slot(str)
    def handle_collection_changed(self, book_id: str):
        self.refresh()

    @Slot(str)
    def handle_book_selected(self, book_id: str):
        """Open a tapped listing or map marker in the Library tab's detail panel."""
        if self.detail_coordinator.show_book(book_id):
            self.main_window.display_library_view()
