from __future__ import annotations

THEMES = ("dark", "light")

_DARK_QSS = """
QMainWindow, QDialog, QWidget { background: #000000; color: #ffffff; }
QListWidget, QTextEdit, QPlainTextEdit, QLineEdit {
    background: #000000; color: #ffffff; border: 1px solid #3a3a3a;
    selection-background-color: #808080; selection-color: #ffffff;
}
QPlainTextEdit, QTextEdit { padding: 10px; }
QPushButton { background: #808080; color: #ffffff; padding: 4px 12px; border: none; }
QPushButton:disabled { background: #404040; color: #8a8a8a; }
QMenuBar, QMenu, QStatusBar { background: #404040; color: #ffffff; }
QMenu::item:selected, QMenuBar::item:selected { background: #808080; }
"""


def normalize_theme(name: str | None) -> str:
    name = (name or "").strip().lower()
    return name if name in THEMES else "dark"


def stylesheet_for(theme: str) -> str:
    # light = native Qt look
    return _DARK_QSS if normalize_theme(theme) == "dark" else ""
