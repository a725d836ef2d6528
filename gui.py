import os
import sys

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QFileDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from utils import (
    DEFAULT_QUARANTINE_DIRNAME,
    FOLDER_PLACEHOLDER,
    PREFIX_MODES,
    PREFIX_PARENT,
    PREVIEW_LIMIT,
    REFERENCES_PLACEHOLDER,
    WINDOW_TITLE,
    human_size,
    total_size,
)
from listing import DirectoryUnavailable, ImageFolderScanner, project_folder_name
from matcher import find_unused_images, format_unused, reference_prefix, split_reference_lines
import file_ops


# -------------------- Widgets --------------------
class FolderLineEdit(QLineEdit):
    """Line edit that also accepts a folder dropped from the file manager."""
    folder_dropped = Signal(str)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setAcceptDrops(True)

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            super().dragEnterEvent(event)

    def dropEvent(self, event):
        urls = event.mimeData().urls()
        folders = [u.toLocalFile() for u in urls if u.isLocalFile() and os.path.isdir(u.toLocalFile())]
        if not folders:
            super().dropEvent(event)
            return
        self.setText(folders[0])
        event.acceptProposedAction()
        self.folder_dropped.emit(folders[0])


def preview_names(names, limit: int = PREVIEW_LIMIT) -> str:
    """Names for a confirmation box, cut off after limit entries."""
    shown = "\n".join(names[:limit])
    if len(names) > limit:
        shown += f"\n… and {len(names) - limit} more"
    return shown


# -------------------- Main Window --------------------
class App(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(640, 620)

        # result of ImageFolderScanner.run() for the loaded folder
        self.image_folder: dict | None = None

        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # Image folder
        folder_box = QGroupBox("Images Folder")
        layout.addWidget(folder_box)
        top = QGridLayout(folder_box)

        self.entry_folder = FolderLineEdit()
        self.entry_folder.setPlaceholderText(FOLDER_PLACEHOLDER)
        self.entry_folder.returnPressed.connect(lambda: self.load_folder(self.entry_folder.text().strip()))
        self.entry_folder.folder_dropped.connect(self.load_folder)
        top.addWidget(self.entry_folder, 0, 0, 1, 2)
        btn_browse = QPushButton("Browse…")
        btn_browse.clicked.connect(self.browse_folder)
        top.addWidget(btn_browse, 0, 2)

        top.addWidget(QLabel("Reference prefix:"), 1, 0)
        self.prefix_combo = QComboBox()
        for key, label in PREFIX_MODES.items():
            self.prefix_combo.addItem(label, key)
        self.prefix_combo.setCurrentIndex(self.prefix_combo.findData(PREFIX_PARENT))
        self.prefix_combo.currentIndexChanged.connect(self._on_prefix_mode_change)
        top.addWidget(self.prefix_combo, 1, 1)
        self.label_prefix = QLabel("")
        top.addWidget(self.label_prefix, 2, 0, 1, 3)
        top.setColumnStretch(1, 1)

        # Pasted references
        refs_box = QGroupBox("FrameMaker's List of Graphic References")
        layout.addWidget(refs_box)
        refs_layout = QVBoxLayout(refs_box)
        self.refs_edit = QPlainTextEdit()
        self.refs_edit.setPlaceholderText(REFERENCES_PLACEHOLDER)
        self.refs_edit.textChanged.connect(self.clear_results)
        refs_layout.addWidget(self.refs_edit)

        # Actions
        actions = QHBoxLayout()
        layout.addLayout(actions)
        actions.addStretch()
        self.btn_show = QPushButton("Show Unused Images")
        self.btn_show.setEnabled(False)
        self.btn_show.clicked.connect(self.show_unused)
        actions.addWidget(self.btn_show)

        # Results, hidden until the first run
        self.results_box = QGroupBox("Unused Images")
        layout.addWidget(self.results_box)
        results_layout = QVBoxLayout(self.results_box)
        self.results_view = QPlainTextEdit()
        self.results_view.setReadOnly(True)
        results_layout.addWidget(self.results_view)

        cleanup = QGridLayout()
        results_layout.addLayout(cleanup)
        cleanup.addWidget(QLabel("Quarantine folder:"), 0, 0)
        self.entry_q = QLineEdit()
        self.entry_q.setPlaceholderText(f"<image folder>/{DEFAULT_QUARANTINE_DIRNAME}")
        cleanup.addWidget(self.entry_q, 0, 1)
        btn_browse_q = QPushButton("Browse…")
        btn_browse_q.clicked.connect(self.browse_quarantine)
        cleanup.addWidget(btn_browse_q, 0, 2)
        self.btn_trash = QPushButton("Move Unused to Recycle Bin")
        self.btn_trash.clicked.connect(self.recycle_unused)
        cleanup.addWidget(self.btn_trash, 1, 1)
        self.btn_quarantine = QPushButton("Move Unused to Quarantine")
        self.btn_quarantine.clicked.connect(self.quarantine_unused)
        cleanup.addWidget(self.btn_quarantine, 1, 2)
        cleanup.setColumnStretch(1, 1)
        self.results_box.setVisible(False)

        # Progress & status
        status_layout = QHBoxLayout()
        layout.addLayout(status_layout)
        self.status_label = QLabel("Ready.")
        status_layout.addWidget(self.status_label)
        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        status_layout.addWidget(self.progress_bar)

        # Log panel
        self.log_box = QGroupBox("Log")
        self.log_box.setCheckable(True)
        self.log_box.setChecked(False)
        layout.addWidget(self.log_box)
        log_layout = QVBoxLayout(self.log_box)
        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setVisible(False)
        log_layout.addWidget(self.log_view)
        self.log_box.toggled.connect(self.log_view.setVisible)

    # -------------------- Helpers --------------------
    def set_status(self, text: str, pct: float | None = None):
        self.status_label.setText(text)
        if pct is not None:
            self.progress_bar.setValue(int(max(0.0, min(1.0, pct)) * 100))
        QApplication.processEvents()

    def log(self, msg: str):
        if self.log_box.isChecked():
            self.log_view.appendPlainText(msg)

    def prefix_mode(self) -> str:
        return self.prefix_combo.currentData()

    def _update_prefix_label(self):
        if self.image_folder is None:
            self.label_prefix.setText("")
            return
        example = reference_prefix(self.image_folder["project_folder"], "<image>")
        self.label_prefix.setText(f"Reference lines must start with: {example}…")

    def clear_results(self):
        """Hide the last result; it no longer matches the current inputs."""
        self.results_view.clear()
        self.results_box.setVisible(False)

    def _on_prefix_mode_change(self):
        self.clear_results()
        if self.image_folder is None:
            return
        self.image_folder["project_folder"] = project_folder_name(self.image_folder["path"], self.prefix_mode())
        self._update_prefix_label()

    # -------------------- Folder --------------------
    def browse_folder(self):
        p = QFileDialog.getExistingDirectory(self, "Select the images folder")
        if p:
            self.entry_folder.setText(p)
            self.load_folder(p)

    def browse_quarantine(self):
        p = QFileDialog.getExistingDirectory(self, "Select quarantine folder")
        if p:
            self.entry_q.setText(p)

    def load_folder(self, folder: str) -> bool:
        """List folder from scratch; a failure clears the previous listing."""
        self.image_folder = None
        self.clear_results()
        self.btn_show.setEnabled(False)
        scanner = ImageFolderScanner(
            folder,
            self.prefix_mode(),
            ui_progress=self.set_status,
            ui_log=self.log,
        )
        try:
            self.image_folder = scanner.run()
        except DirectoryUnavailable as e:
            self._update_prefix_label()
            self.set_status("Folder unavailable.", 0.0)
            QMessageBox.critical(self, "Folder unavailable", str(e))
            return False
        self.entry_folder.setText(self.image_folder["path"])
        self._update_prefix_label()
        self.btn_show.setEnabled(True)
        return True

    # -------------------- Matching --------------------
    def compute_unused(self) -> list[str]:
        """Unused images for the current folder and the current pasted text."""
        if self.image_folder is None:
            return []
        used = split_reference_lines(self.refs_edit.toPlainText())
        return find_unused_images(self.image_folder["images"], used, self.image_folder["project_folder"])

    def show_unused(self):
        if self.image_folder is None:
            self.set_status("Select the images folder first.", None)
            return
        unused = self.compute_unused()
        self.results_view.setPlainText(format_unused(unused))
        self.results_box.setVisible(True)
        size = human_size(total_size(self.image_folder["path"], unused))
        self.set_status(
            f"{len(unused)} of {len(self.image_folder['images'])} file(s) unused ({size}).",
            1.0,
        )

    # -------------------- Cleanup --------------------
    def recycle_unused(self):
        self._clean_up(
            "Move to Recycle Bin",
            "Move {n} unused file(s) to the Recycle Bin?",
            file_ops.send_to_recycle_bin,
        )

    def quarantine_unused(self):
        if self.image_folder is None:
            return
        dest = self.entry_q.text().strip() or os.path.join(self.image_folder["path"], DEFAULT_QUARANTINE_DIRNAME)
        self._clean_up(
            "Move to quarantine",
            f"Move {{n}} unused file(s) to\n{dest}?",
            lambda path: file_ops.quarantine_file(path, dest),
        )

    def _clean_up(self, title: str, question: str, action):
        if self.image_folder is None:
            self.set_status("Select the images folder first.", None)
            return
        if self.results_box.isHidden():
            self.set_status("Show the unused images first.", None)
            return
        # any input change hides the results, so this is the list on screen
        unused = self.compute_unused()
        if not unused:
            QMessageBox.information(self, "Nothing to clean up", "No unused images found.")
            return
        confirm = QMessageBox.question(self, title, question.format(n=len(unused)) + "\n\n" + preview_names(unused))
        if confirm != QMessageBox.StandardButton.Yes:
            return
        done, errors = file_ops.clean_up_images(
            self.image_folder["path"],
            unused,
            action,
            ui_progress=self.set_status,
            ui_log=self.log,
        )
        msg = f"Moved {done} file(s)."
        if errors:
            msg += f" {len(errors)} error(s) occurred:\n" + "\n".join(f"{p}: {e}" for p, e in errors)
        if self.load_folder(self.image_folder["path"]):
            self.show_unused()
        QMessageBox.information(self, "Cleanup complete", msg)
        self.set_status("Cleanup complete.", 1.0)


def main():  # pragma: no cover - UI entry point
    app = QApplication(sys.argv)
    win = App()
    win.show()
    app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    main()
