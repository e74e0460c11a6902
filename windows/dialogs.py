"""
Reusable dialog classes for Regex Replace.
"""

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QLineEdit, QCheckBox, QSpinBox
)

from constants import MAX_HISTORY_LIMIT, HISTORY_LIMIT_STEP
from managers.settings import sanitize_flags
from styles import DIALOG_BUTTON_STYLE, INPUT_STYLE


class SettingsDialog(QDialog):
    """Dialog for editing default flags, preview visibility and pattern history."""

    def __init__(self, settings_manager, parent=None):
        super().__init__(parent)
        self.settings_manager = settings_manager

        self.setWindowTitle("Regex Replace Settings")
        self.setMinimumWidth(420)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()

        # Default flags
        flags_layout = QHBoxLayout()
        flags_label = QLabel("Default flags:")
        flags_label.setFixedWidth(110)
        flags_layout.addWidget(flags_label)

        self.flags_input = QLineEdit()
        self.flags_input.setText(self.settings_manager.default_flags)
        self.flags_input.setPlaceholderText("Enter flags")
        self.flags_input.setToolTip("Default regex flags (g=global, i=ignore case, m=multiline)")
        self.flags_input.setStyleSheet(INPUT_STYLE)
        flags_layout.addWidget(self.flags_input)
        layout.addLayout(flags_layout)

        # Show preview
        self.preview_checkbox = QCheckBox("Show before/after preview in the replace dialog")
        self.preview_checkbox.setChecked(self.settings_manager.show_preview)
        layout.addWidget(self.preview_checkbox)

        # History limit
        limit_layout = QHBoxLayout()
        limit_label = QLabel("History limit:")
        limit_label.setFixedWidth(110)
        limit_layout.addWidget(limit_label)

        self.history_limit_spin = QSpinBox()
        self.history_limit_spin.setRange(0, MAX_HISTORY_LIMIT)
        self.history_limit_spin.setSingleStep(HISTORY_LIMIT_STEP)
        self.history_limit_spin.setValue(self.settings_manager.history_limit)
        self.history_limit_spin.setToolTip("Maximum number of recent patterns to remember")
        limit_layout.addWidget(self.history_limit_spin)
        limit_layout.addStretch()
        layout.addLayout(limit_layout)

        # Clear history
        history_layout = QHBoxLayout()
        self.history_status = QLabel()
        self._update_history_status()
        history_layout.addWidget(self.history_status)
        history_layout.addStretch()

        self.clear_history_btn = QPushButton("Clear history")
        self.clear_history_btn.setStyleSheet(DIALOG_BUTTON_STYLE)
        self.clear_history_btn.clicked.connect(self._clear_history)
        history_layout.addWidget(self.clear_history_btn)
        layout.addLayout(history_layout)

        # Buttons
        button_layout = QHBoxLayout()
        button_layout.addStretch()

        ok_btn = QPushButton("OK")
        ok_btn.setStyleSheet(DIALOG_BUTTON_STYLE)
        ok_btn.clicked.connect(self._on_accept)
        button_layout.addWidget(ok_btn)

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(DIALOG_BUTTON_STYLE)
        cancel_btn.clicked.connect(self.reject)
        button_layout.addWidget(cancel_btn)

        layout.addLayout(button_layout)
        self.setLayout(layout)

    def _update_history_status(self):
        count = len(self.settings_manager.recent_patterns)
        self.history_status.setText(f"{count} saved pattern(s)")

    def _clear_history(self):
        self.settings_manager.clear_history()
        self._update_history_status()

    def _on_accept(self):
        """Store the edited values and close"""
        self.flags_input.setText(sanitize_flags(self.flags_input.text()))
        self.settings_manager.set_default_flags(self.flags_input.text())
        self.settings_manager.set_show_preview(self.preview_checkbox.isChecked())
        self.settings_manager.set_history_limit(self.history_limit_spin.value())
        self.accept()
