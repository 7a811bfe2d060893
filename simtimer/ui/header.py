"""Top header bar: app title and static navigation links."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget


NAV_ITEMS = ("Notices", "Community", "Suggestions")


class HeaderBar(QFrame):
    def __init__(self, title: str = "SimTimer", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("header")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        self._title = QLabel(title, self)
        self._title.setObjectName("headerTitle")
        layout.addWidget(self._title)
        layout.addStretch(1)

        self._nav_labels: list[QLabel] = []
        for text in NAV_ITEMS:
            lbl = QLabel(text, self)
            lbl.setObjectName("navLink")
            lbl.setCursor(Qt.CursorShape.PointingHandCursor)
            self._nav_labels.append(lbl)
            layout.addWidget(lbl)

    @property
    def title(self) -> str:
        return self._title.text()

    @property
    def nav_items(self) -> list[str]:
        return [lbl.text() for lbl in self._nav_labels]
