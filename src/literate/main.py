"""Main entry point for the Literate application."""

import sys

from PySide6.QtWidgets import QApplication

from literate.coordinators import BookDetailCoordinator, HomeCoordinator, LibraryCoordinator
from literate.core import sample_books
from literate.services import (
    AssetCoverResolver,
    BookStore,
    SettingsManager,
    ShareService,
    configure_logging,
)
from literate.ui import BookDetailPanel, HomeScreen, LibraryScreen, MainWindow, MapCanvas


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    configure_logging(settings.get_log_level())

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Literate")
    app.setOrganizationName("Literate")

    # 3. Initialize state and services
    book_store = BookStore(sample_books() if settings.should_seed_samples() else [])
    cover_resolver = AssetCoverResolver(settings.get_assets_dir())
    share_service = ShareService()

    # 4. Construct UI
    main_window = MainWindow()
    map_canvas = MapCanvas()
    home_screen = HomeScreen(map_canvas, cover_resolver)
    library_screen = LibraryScreen(cover_resolver)
    detail_panel = BookDetailPanel(cover_resolver)
    main_window.set_home_screen(home_screen)
    main_window.set_library_views(library_screen, detail_panel)

    # 5. Instantiate Coordinators (Dependency Injection); they wire their own signals
    detail_coordinator = BookDetailCoordinator(
        detail_panel=detail_panel,
        book_store=book_store,
        share_service=share_service,
        main_window=main_window,
    )
    library_coordinator = LibraryCoordinator(
        library_screen=library_screen,
        book_store=book_store,
        detail_coordinator=detail_coordinator,
        main_window=main_window,
    )
    home_coordinator = HomeCoordinator(
        home_screen=home_screen,
        map_canvas=map_canvas,
        book_store=book_store,
        detail_coordinator=detail_coordinator,
        main_window=main_window,
    )

    # 6. Show UI and start event loop
    library_coordinator.refresh()
    home_coordinator.show_home()
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
