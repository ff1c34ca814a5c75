"""Cover thumbnail widget with a placeholder fallback."""

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel

PLACEHOLDER_TEXT = "📖"


class CoverView(QLabel):
    """Fixed-size label showing a cover image, or a book placeholder."""

    def __init__(self, width: int, height: int, parent=None):
        super().__init__(parent)
        self._width = width
        self._height = height
        self.setFixedSize(width, height)
        self.setAlignment(Qt.AlignCenter)
        self.is_placeholder = True
        self.set_cover(None)

    def set_cover(self, pixmap: Optional[QPixmap]):
        """Show the given cover, or the placeholder when None or empty."""
        if pixmap is None or pixmap.isNull():
            self._set_placeholder()
            return

        self.is_placeholder = False
        scaled = pixmap.scaled(
            self._width,
            self._height,
            Qt.KeepAspectRatioByExpanding,
            Qt.SmoothTransformation,
        )
        self.setText("")
        self.setPixmap(scaled)
        self.setStyleSheet("""
            QLabel {
                border: 1px solid #444;
                border-radius: 6px;
            }
        """)

    def _set_placeholder(self):
        self.is_placeholder = True
        self.clear()
        self.setText(PLACEHOLDER_TEXT)
        self.setStyleSheet(f"""
            QLabel {{
                border: 1px solid #444;
                border-radius: 6px;
                background-color: #2a2a2a;
                color: #888;
                font-size: {max(self._height // 3, 12)}px;
            }}
        """)
