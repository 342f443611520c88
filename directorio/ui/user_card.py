"""Tarjeta de presentación de un usuario."""

from __future__ import annotations

import html
from typing import Callable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

from directorio.models.user import User


class UserCard(QFrame):
    """Muestra un usuario y notifica los clics; no guarda estado propio."""

    def __init__(self, user: User, selected: bool, on_click: Callable[[], None], parent=None) -> None:
        super().__init__(parent)
        self._on_click = on_click
        self.setObjectName("userCard")
        self.setProperty("selected", selected)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFrameShape(QFrame.Shape.StyledPanel)

        title = QLabel(user.name)
        title.setObjectName("cardTitle")
        title.setTextFormat(Qt.TextFormat.PlainText)

        layout = QVBoxLayout()
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(4)
        layout.addWidget(title)
        layout.addWidget(QLabel(f"<b>Email:</b> {html.escape(user.email)}"))
        layout.addWidget(QLabel(f"<b>Empresa:</b> {html.escape(user.company_name)}"))
        layout.addWidget(QLabel(f"<b>Ciudad:</b> {html.escape(user.city)}"))
        self.setLayout(layout)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # pragma: no cover - interacción UI
        if event.button() == Qt.MouseButton.LeftButton:
            self._on_click()
            event.accept()
            return
        super().mousePressEvent(event)


__all__ = ["UserCard"]
