from __future__ import annotations

from PySide6.QtWidgets import (
    QWidget,
    QMessageBox,
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
)


class NewNoteDialog(QDialog):
    """Collects title and content for a new text note; both must be non-empty."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle("Новая текстовая заметка")
        self.setModal(True)
        self.resize(480, 360)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Заголовок…")
        self.content_input = QPlainTextEdit()
        self.content_input.setPlaceholderText("Текст заметки…")

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Введите заголовок заметки:"))
        layout.addWidget(self.title_input)
        layout.addWidget(self.content_input)

        buttons = QHBoxLayout()
        btn_cancel = QPushButton("Отмена")
        btn_ok = QPushButton("Создать")
        btn_ok.setDefault(True)
        btn_cancel.clicked.connect(self.reject)
        btn_ok.clicked.connect(self._try_accept)
        buttons.addStretch(1)
        buttons.addWidget(btn_cancel)
        buttons.addWidget(btn_ok)
        layout.addLayout(buttons)

        self.title_input.setFocus()

    def title(self) -> str:
        return self.title_input.text().strip()

    def content(self) -> str:
        return self.content_input.toPlainText()

    def _try_accept(self) -> None:
        if not self.title() or not self.content().strip():
            QMessageBox.warning(self, "Новая заметка", "Заголовок и текст не могут быть пустыми.")
            return
        self.accept()
