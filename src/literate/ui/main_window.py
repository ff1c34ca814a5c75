"""Main Window - Application shell with tabs and menus."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMessageBox, QSplitter, QTabWidget, QWidget


class MainWindow(QMainWindow):
    """Hosts the Home and Library tabs and the library menu actions."""

    HOME_TAB = 0
    LIBRARY_TAB = 1

    # Emitted when "Show Favorites Only" is toggled
    favorites_only_toggled = Signal(bool)
    # Emitted when the user asks for a sample book
    add_book_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Literate")
        self.setGeometry(100, 100, 1100, 760)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)

        # Placeholders until screens are installed
        self.tabs.addTab(QWidget(), "Home")
        self.library_splitter = QSplitter(Qt.Horizontal)
        self.tabs.addTab(self.library_splitter, "Library")

    def _create_menu_bar(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        library_menu = menu_bar.addMenu("&Library")

        self.favorites_only_action = QAction("Show &Favorites Only", self)
        self.favorites_only_action.setCheckable(True)
        self.favorites_only_action.toggled.connect(self.favorites_only_toggled.emit)
        library_menu.addAction(self.favorites_only_action)

        add_action = QAction("&Add Sample Book", self)
        add_action.setShortcut("Ctrl+N")
        add_action.triggered.connect(self.add_book_requested.emit)
        library_menu.addAction(add_action)

        library_menu.addSeparator()

        map_action = QAction("View &Map", self)
        map_action.setShortcut("Ctrl+M")
        map_action.triggered.connect(self.display_home_view)
        library_menu.addAction(map_action)

    def set_home_screen(self, home_screen: QWidget):
        """Install the home screen as the first tab."""
        old = self.tabs.widget(self.HOME_TAB)
        self.tabs.removeTab(self.HOME_TAB)
        self.tabs.insertTab(self.HOME_TAB, home_screen, "Home")
        if old is not None:
            old.deleteLater()

    def set_library_views(self, library_screen: QWidget, detail_panel: QWidget):
        """Install the list and detail panel side by side in the Library tab."""
        self.library_splitter.addWidget(library_screen)
        self.library_splitter.addWidget(detail_panel)
        self.library_splitter.setStretchFactor(0, 3)
        self.library_splitter.setStretchFactor(1, 2)

    def display_home_view(self):
        self.tabs.setCurrentIndex(self.HOME_TAB)

    def display_library_view(self):
        self.tabs.setCurrentIndex(self.LIBRARY_TAB)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)
