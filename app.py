#!/usr/bin/env python3
"""
Regex Replace with PyQt6
A plain text editor with regex find/replace, live before/after preview
and a history of recent patterns.
"""

import sys
import os

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QFileDialog, QMessageBox, QWidget,
    QVBoxLayout, QHBoxLayout, QPushButton, QPlainTextEdit
)
from PyQt6.QtGui import QShortcut, QKeySequence

from managers.settings import SettingsManager
from styles import BUTTON_STYLE
from windows.dialogs import SettingsDialog
from windows.regex_replace import RegexReplaceDialog


class RegexReplaceWindow(QMainWindow):
    """Main editor window"""

    def __init__(self, file_path=None, settings_file=None):
        super().__init__()
        self.file_path = None
        if settings_file is None:
            settings_file = os.path.join(os.path.dirname(__file__), '.regex_replace_settings.json')
        self.settings_manager = SettingsManager(settings_file)
        self.settings_manager.load()
        self.replace_dialog = None  # Created each time a replace command runs

        self.init_ui()

        if file_path:
            self.load_file(file_path)

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle("Regex Replace")
        self.setGeometry(100, 100, 900, 650)

        central_widget = QWidget()
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.create_button_toolbar(main_layout)

        self.text_edit = QPlainTextEdit()
        main_layout.addWidget(self.text_edit, 1)

        central_widget.setLayout(main_layout)
        self.setCentralWidget(central_widget)

        self.statusBar().showMessage("Ready")

        self.setup_shortcuts()

    def setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        # Ctrl+O - Open file
        QShortcut(QKeySequence("Ctrl+O"), self).activated.connect(self.open_file_dialog)

        # Ctrl+S - Save file
        QShortcut(QKeySequence("Ctrl+S"), self).activated.connect(self.save_file)

        # Ctrl+H - Regex replace
        QShortcut(QKeySequence("Ctrl+H"), self).activated.connect(self.show_replace_dialog)

        # Ctrl+Shift+H - Regex replace in selection
        QShortcut(QKeySequence("Ctrl+Shift+H"), self).activated.connect(self.show_replace_in_selection)

        # Ctrl+, - Settings
        QShortcut(QKeySequence("Ctrl+,"), self).activated.connect(self.show_settings_dialog)

    def create_button_toolbar(self, layout):
        """Create button toolbar with file and replace operations"""
        toolbar = QWidget()
        toolbar.setStyleSheet("QWidget { background-color: #E8E8E8; }")
        toolbar_layout = QHBoxLayout()
        toolbar_layout.setContentsMargins(8, 8, 8, 8)
        toolbar_layout.setSpacing(8)

        buttons = (
            ("📂 Open", "Open a text file (Ctrl+O)", self.open_file_dialog),
            ("💾 Save", "Save the current file (Ctrl+S)", self.save_file),
            ("🔁 Regex Replace", "Open replace dialog (Ctrl+H)", self.show_replace_dialog),
            ("✂ Replace in Selection", "Replace in selection (Ctrl+Shift+H)", self.show_replace_in_selection),
            ("⚙ Settings", "Regex replace settings (Ctrl+,)", self.show_settings_dialog),
        )
        for text, tooltip, slot in buttons:
            button = QPushButton(text)
            button.setToolTip(tooltip)
            button.setStyleSheet(BUTTON_STYLE)
            button.clicked.connect(slot)
            toolbar_layout.addWidget(button)

        toolbar_layout.addStretch()
        toolbar.setLayout(toolbar_layout)
        layout.addWidget(toolbar)

    def open_file_dialog(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open File", "", "Text Files (*.txt *.md);;All Files (*)")
        if file_path:
            self.load_file(file_path)

    def load_file(self, file_path):
        """Load content from file"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (IOError, OSError, UnicodeDecodeError) as e:
            QMessageBox.critical(self, "Error", f"Failed to load file:\n{str(e)}")
            return False

        self.text_edit.setPlainText(content)
        self.file_path = file_path
        self.update_window_title()
        return True

    def save_file(self, file_path=None):
        """Save content to file, asking for a path if there is none yet"""
        if file_path:
            self.file_path = file_path

        if not self.file_path:
            chosen, _ = QFileDialog.getSaveFileName(
                self, "Save File", "", "Text Files (*.txt *.md);;All Files (*)")
            if not chosen:
                return False
            self.file_path = chosen

        try:
            with open(self.file_path, 'w', encoding='utf-8') as f:
                f.write(self.text_edit.toPlainText())
        except (IOError, OSError) as e:
            QMessageBox.critical(self, "Error", f"Failed to save file:\n{str(e)}")
            return False

        self.update_window_title()
        return True

    def update_window_title(self):
        if self.file_path:
            self.setWindowTitle(f"Regex Replace - {os.path.basename(self.file_path)}")
        else:
            self.setWindowTitle("Regex Replace")

    def show_replace_dialog(self, selection_only=False):
        """Show the regex replace dialog for the editor"""
        if self.replace_dialog is not None:
            self.replace_dialog.close()

        # A fresh dialog picks up changed settings and history
        self.replace_dialog = RegexReplaceDialog(
            self.text_edit, self.settings_manager, self, selection_only=selection_only)
        self.replace_dialog.replaced.connect(self.show_replace_count)
        self.replace_dialog.show()
        self.replace_dialog.raise_()
        self.replace_dialog.activateWindow()
        return self.replace_dialog

    def show_replace_in_selection(self):
        return self.show_replace_dialog(selection_only=True)

    def show_replace_count(self, count):
        """Show the Replace all result on the status bar"""
        self.statusBar().showMessage(f"Replaced {count} match(es)", 5000)

    def show_settings_dialog(self):
        dialog = SettingsDialog(self.settings_manager, self)
        return dialog.exec()


def main():
    """Main application entry point"""
    app = QApplication(sys.argv)

    # Check if a file was provided as argument
    file_path = None
    if len(sys.argv) > 1:
        file_path = sys.argv[1]
        if not os.path.exists(file_path):
            print(f"Warning: File not found: {file_path}")
            file_path = None

    window = RegexReplaceWindow(file_path)
    window.show()

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
