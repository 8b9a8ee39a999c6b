from __future__ import annotations

from PySide6.QtCore import Qt, QSettings
from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QListWidget, QListWidgetItem, QPlainTextEdit, QLineEdit, QPushButton,
    QSplitter,
)

from notemaster.settings import APP_NAME
from notemaster.logging_setup import log
from notemaster.core.errors import StorageWriteError
from notemaster.core.note import Note
from notemaster.repository import NoteRepository
from notemaster.ui.dialogs import NewNoteDialog
from notemaster.ui.theme import normalize_theme, stylesheet_for
from notemaster.ui.ui_settings import (
    SettingsKeys, get_str, get_int_list, safe_set_setting, blocked_signals,
)

NOTICE_MS = 5000


class NotesWindow(QMainWindow):
    def __init__(self, repo: NoteRepository):
        super().__init__()
        self.setWindowTitle("NoteMaster")
        self.repo = repo

        self._settings = QSettings(APP_NAME, APP_NAME)
        self._theme = normalize_theme(get_str(self._settings, SettingsKeys.UI_THEME, "dark"))

        # id of the note open in the editor; the list never resolves by title
        self._current_id: str | None = None

        # UI
        self.listw = QListWidget()
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Заголовок")
        self.editor = QPlainTextEdit()

        self.btn_add = QPushButton("Добавить заметку")
        self.btn_remove = QPushButton("Удалить выбранную")
        self.btn_save = QPushButton("Сохранить изменения")

        buttons = QHBoxLayout()
        buttons.addWidget(self.btn_add)
        buttons.addWidget(self.btn_remove)
        buttons.addStretch(1)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(8, 8, 8, 8)
        right_layout.addWidget(self.title_edit)
        right_layout.addWidget(self.editor, 1)
        right_layout.addWidget(self.btn_save)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(self.listw)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)

        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.addLayout(buttons)
        root_layout.addWidget(self.splitter, 1)
        self.setCentralWidget(root)

        # Signals
        self.btn_add.clicked.connect(self.add_text_note)
        self.btn_remove.clicked.connect(self.remove_selected_note)
        self.btn_save.clicked.connect(self.save_changes)
        self.listw.itemSelectionChanged.connect(self._on_select_note)

        self._build_menu()
        self._restore_ui_state()
        self.apply_theme(self._theme)

        self._show_note(None)
        self.refresh_list(select_id=get_str(self._settings, SettingsKeys.LAST_NOTE_ID, "") or None)
        log.info("Окно открыто: заметок=%d файл=%s", len(self.repo), self.repo.store.path)

    def closeEvent(self, event):  # type: ignore[override]
        self._save_ui_state()
        super().closeEvent(event)

    def _build_menu(self):
        menubar = self.menuBar()
        filem = menubar.addMenu("Файл")

        act_new = QAction("Новая заметка…", self)
        act_new.setShortcut("Ctrl+N")
        act_new.triggered.connect(self.add_text_note)

        act_save = QAction("Сохранить", self)
        act_save.setShortcut("Ctrl+S")
        act_save.triggered.connect(self.save_changes)

        act_reload = QAction("Перечитать с диска", self)
        act_reload.setShortcut("F5")
        act_reload.triggered.connect(self.reload_from_disk)

        act_quit = QAction("Выход", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)

        filem.addAction(act_new)
        filem.addAction(act_save)
        filem.addSeparator()
        filem.addAction(act_reload)
        filem.addSeparator()
        filem.addAction(act_quit)

        viewm = menubar.addMenu("Вид")
        group = QActionGroup(self)
        group.setExclusive(True)
        for theme, label in (("dark", "Тема: Dark"), ("light", "Тема: Light")):
            act = QAction(label, self, checkable=True)
            act.setChecked(theme == self._theme)
            act.triggered.connect(lambda _checked=False, t=theme: self.apply_theme(t))
            group.addAction(act)
            viewm.addAction(act)

    # ---- theme / ui state ----

    def apply_theme(self, theme: str) -> None:
        self._theme = normalize_theme(theme)
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(stylesheet_for(self._theme))
        safe_set_setting(self._settings, SettingsKeys.UI_THEME, self._theme)
        log.debug("Тема применена: %s", self._theme)

    def _restore_ui_state(self) -> None:
        geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
        if geo:
            self.restoreGeometry(geo)
        else:
            self.resize(800, 600)
        sizes = get_int_list(self._settings, SettingsKeys.UI_SPLITTER)
        if sizes:
            self.splitter.setSizes(sizes)

    def _save_ui_state(self) -> None:
        safe_set_setting(self._settings, SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        safe_set_setting(self._settings, SettingsKeys.UI_SPLITTER, self.splitter.sizes())
        safe_set_setting(self._settings, SettingsKeys.LAST_NOTE_ID, self._current_id or "")

    # ---- list / editor ----

    def refresh_list(self, *, select_id: str | None = None) -> None:
        """Rebuild the list from the repository and reselect by id."""
        with blocked_signals(self.listw):
            self.listw.clear()
            for note in self.repo.list_all():
                item = QListWidgetItem(note.title)
                item.setData(Qt.UserRole, note.id)
                item.setToolTip(note.render())
                self.listw.addItem(item)
                if note.id == select_id:
                    self.listw.setCurrentItem(item)

        if select_id is not None and select_id in self.repo:
            self._show_note(self.repo.get(select_id))
        else:
            self._show_note(None)

    def _selected_id(self) -> str | None:
        items = self.listw.selectedItems()
        if not items:
            return None
        return items[0].data(Qt.UserRole)

    def _on_select_note(self):
        note_id = self._selected_id()
        self._show_note(self.repo.get(note_id) if note_id else None)

    def _show_note(self, note: Note | None) -> None:
        self._current_id = note.id if note is not None else None
        with blocked_signals(self.editor), blocked_signals(self.title_edit):
            self.title_edit.setText(note.title if note else "")
            self.editor.setPlainText(note.content if note else "")
        editable = note is not None
        self.title_edit.setEnabled(editable)
        self.editor.setReadOnly(not editable)
        self.btn_save.setEnabled(editable)
        self.btn_remove.setEnabled(editable)

    # ---- actions ----

    def add_text_note(self):
        dlg = NewNoteDialog(self)
        if not dlg.exec():
            return
        note = Note(dlg.title(), dlg.content())
        log.info("Создание заметки: id=%s", note.id)
        self._mutate(lambda: self.repo.add_or_replace(note))
        self.refresh_list(select_id=note.id)

    def remove_selected_note(self):
        note_id = self._selected_id()
        if note_id is None:
            return
        log.info("Удаление заметки: id=%s", note_id)
        self._mutate(lambda: self.repo.remove_by_id(note_id))
        self.refresh_list()

    def save_changes(self):
        if self._current_id is None:
            return
        note = self.repo.get(self._current_id)
        if note is None:
            # removed by a reload in the meantime
            self._show_note(None)
            return

        title = self.title_edit.text().strip() or note.title
        updated = note.edited(title=title, content=self.editor.toPlainText())
        if self._mutate(lambda: self.repo.add_or_replace(updated)):
            self.statusBar().showMessage("Изменения сохранены", NOTICE_MS)
        self.refresh_list(select_id=updated.id)

    def reload_from_disk(self):
        keep = self._current_id
        self.repo.reload()
        self.refresh_list(select_id=keep)
        self.statusBar().showMessage(f"Заметок загружено: {len(self.repo)}", NOTICE_MS)

    def _mutate(self, op) -> bool:
        """Run a repository mutation; a failed write becomes a status bar notice."""
        try:
            op()
            return True
        except StorageWriteError as e:
            log.warning("Заметки не сохранены на диск: %s", e)
            self.statusBar().showMessage(f"Не удалось сохранить заметки: {e}", NOTICE_MS * 2)
            return False
