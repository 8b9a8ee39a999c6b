from __future__ import annotations

from PySide6.QtWidgets import QApplication

from notemaster.settings import APP_NAME, NOTES_PATH
from notemaster.logging_setup import install_global_exception_hooks, log, SESSION_ID
from notemaster.repository import NoteRepository
from notemaster.storage.file_store import NoteFileStore
from notemaster.ui.main_window import NotesWindow


def main() -> int:
    install_global_exception_hooks()
    app = QApplication([])
    app.setApplicationName(APP_NAME)

    repo = NoteRepository.open(NoteFileStore(NOTES_PATH))
    win = NotesWindow(repo)
    win.show()
    log.info("Приложение запущено, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
