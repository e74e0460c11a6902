"""
Regex Replace dialog window.
Search pattern, replacement template and flags with a live before/after
preview of every match. Works on the whole document or on the selection.
"""

import html
import re

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QCheckBox, QComboBox, QTextEdit
)

from constants import (
    MATCH_LIST_LIMIT, MATCH_TEXT_MAX_LENGTH, PREVIEW_MAX_LENGTH,
    SELECTION_PREFILL_LIMIT, TRUNCATION_MARKER
)
from models.replace_result import Failure
from styles import (
    DIALOG_BUTTON_STYLE, PRIMARY_BUTTON_STYLE, INPUT_STYLE, MATCH_COUNT_STYLE,
    ERROR_LABEL_STYLE, PREVIEW_STYLE, MATCH_HIGHLIGHT_STYLE,
    REPLACEMENT_HIGHLIGHT_STYLE, TRUNCATED_STYLE, PREVIEW_TEXT_STYLE
)
from utils.regex_engine import RegexEngine
from utils.segments import build_preview


def truncate(text, max_len):
    """Cut *text* to *max_len* characters, marking the cut."""
    return text if len(text) <= max_len else text[:max_len] + TRUNCATION_MARKER


def selected_text(text_edit):
    """Selected text of a QTextEdit/QPlainTextEdit with real newlines."""
    # Qt reports line breaks inside a selection as U+2029
    return text_edit.textCursor().selectedText().replace('\u2029', '\n')


def segments_to_html(segments, truncated):
    """Render preview segments as HTML with highlighted spans."""
    parts = []
    for segment in segments:
        text = html.escape(segment.text).replace('\n', '<br>')
        if segment.is_replacement:
            parts.append(f'<span style="{REPLACEMENT_HIGHLIGHT_STYLE}">{text}</span>')
        elif segment.is_match:
            parts.append(f'<span style="{MATCH_HIGHLIGHT_STYLE}">{text}</span>')
        else:
            parts.append(text)
    if truncated:
        parts.append(f'<span style="{TRUNCATED_STYLE}">{TRUNCATION_MARKER}</span>')
    return ''.join(parts)


class RegexReplaceDialog(QDialog):
    """Dialog for regex find and replace with preview"""

    replaced = pyqtSignal(int)  # Number of matches replaced by Replace all

    def __init__(self, text_edit, settings_manager, parent=None, selection_only=False):
        super().__init__(parent)
        self.text_edit = text_edit
        self.settings_manager = settings_manager
        self.selection_only = selection_only
        self.last_result = None  # Last ReplaceResult or Failure shown

        self.setWindowTitle("Regex Replace")
        self.setModal(False)
        self.resize(620, 520)

        self._setup_ui()
        self._initialize_from_selection()
        self.update_preview()

    def _setup_ui(self):
        layout = QVBoxLayout()

        # Search row
        search_layout = QHBoxLayout()
        search_label = QLabel("Search pattern:")
        search_label.setFixedWidth(110)
        search_layout.addWidget(search_label)
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Enter regex pattern (e.g., \\d+)")
        self.search_input.setStyleSheet(INPUT_STYLE)
        self.search_input.textChanged.connect(self.update_preview)
        search_layout.addWidget(self.search_input)
        layout.addLayout(search_layout)

        # Replace row
        replace_layout = QHBoxLayout()
        replace_label = QLabel("Replace with:")
        replace_label.setFixedWidth(110)
        replace_layout.addWidget(replace_label)
        self.replace_input = QLineEdit()
        self.replace_input.setPlaceholderText("Replacement text ($1, $2 for groups)")
        self.replace_input.setStyleSheet(INPUT_STYLE)
        self.replace_input.textChanged.connect(self.update_preview)
        replace_layout.addWidget(self.replace_input)
        layout.addLayout(replace_layout)

        # Flags row
        default_flags = self.settings_manager.default_flags
        flags_layout = QHBoxLayout()
        flags_layout.addWidget(QLabel("Flags:"))
        self.flag_global_cb = QCheckBox("g (global)")
        self.flag_global_cb.setChecked('g' in default_flags)
        self.flag_case_cb = QCheckBox("i (ignore case)")
        self.flag_case_cb.setChecked('i' in default_flags)
        self.flag_multiline_cb = QCheckBox("m (multiline)")
        self.flag_multiline_cb.setChecked('m' in default_flags)
        for checkbox in (self.flag_global_cb, self.flag_case_cb, self.flag_multiline_cb):
            checkbox.toggled.connect(self.update_preview)
            flags_layout.addWidget(checkbox)
        flags_layout.addStretch()
        layout.addLayout(flags_layout)

        # Scope row
        self.selection_cb = QCheckBox("Replace in selection only")
        self.selection_cb.setChecked(self.selection_only)
        self.selection_cb.toggled.connect(self._on_selection_toggled)
        layout.addWidget(self.selection_cb)

        # Match count / error label
        self.match_count_label = QLabel("")
        self.match_count_label.setStyleSheet(MATCH_COUNT_STYLE)
        layout.addWidget(self.match_count_label)

        # Preview pane (optional)
        self.preview_edit = None
        if self.settings_manager.show_preview:
            layout.addWidget(QLabel("Preview:"))
            self.preview_edit = QTextEdit()
            self.preview_edit.setReadOnly(True)
            self.preview_edit.setStyleSheet(PREVIEW_STYLE)
            self.preview_edit.setMinimumHeight(200)
            layout.addWidget(self.preview_edit, 1)

        # Recent patterns (only when there is history)
        self.history_combo = None
        patterns = self.settings_manager.recent_patterns
        if patterns:
            history_layout = QHBoxLayout()
            history_layout.addWidget(QLabel("Recent patterns:"))
            self.history_combo = QComboBox()
            self.history_combo.addItem("Select a pattern", None)
            for index, pattern in enumerate(patterns):
                self.history_combo.addItem(f"{pattern['search']} → {pattern['replace']}", index)
            self.history_combo.currentIndexChanged.connect(self._on_history_selected)
            history_layout.addWidget(self.history_combo, 1)
            layout.addLayout(history_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        # Buttons
        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.replace_all_btn = QPushButton("Replace all")
        self.replace_all_btn.setStyleSheet(PRIMARY_BUTTON_STYLE)
        self.replace_all_btn.clicked.connect(self.perform_replace)
        button_layout.addWidget(self.replace_all_btn)

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.setStyleSheet(DIALOG_BUTTON_STYLE)
        self.cancel_btn.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_btn)

        layout.addLayout(button_layout)
        self.setLayout(layout)

    def _initialize_from_selection(self):
        """Prefill the search field with a short selection, escaped as a literal pattern"""
        selection = selected_text(self.text_edit)
        if selection and len(selection) < SELECTION_PREFILL_LIMIT:
            self.search_input.setText(re.escape(selection))

    def _on_selection_toggled(self, checked):
        self.selection_only = checked
        self.update_preview()

    def _on_history_selected(self, index):
        data = self.history_combo.itemData(index)
        if data is None:
            return
        patterns = self.settings_manager.recent_patterns
        if 0 <= data < len(patterns):
            self.load_pattern(patterns[data])

    def load_pattern(self, pattern):
        """Fill the inputs and flags from a history entry"""
        self.search_input.setText(pattern.get('search', ''))
        self.replace_input.setText(pattern.get('replace', ''))
        flags = pattern.get('flags', '')
        self.flag_global_cb.setChecked('g' in flags)
        self.flag_case_cb.setChecked('i' in flags)
        self.flag_multiline_cb.setChecked('m' in flags)
        self.update_preview()

    def get_flags(self):
        flags = ''
        if self.flag_global_cb.isChecked():
            flags += 'g'
        if self.flag_case_cb.isChecked():
            flags += 'i'
        if self.flag_multiline_cb.isChecked():
            flags += 'm'
        return flags

    def get_text(self):
        """Text the replacement applies to: the selection in selection mode, else the document"""
        if self.selection_only:
            selection = selected_text(self.text_edit)
            if selection:
                return selection
        return self.text_edit.toPlainText()

    def update_preview(self):
        """Recompute matches and refresh the count label and preview"""
        pattern = self.search_input.text()
        if not pattern:
            self.last_result = None
            self._show_empty_state()
            return

        result = RegexEngine.preview(
            self.get_text(), pattern, self.replace_input.text(), self.get_flags())
        self.last_result = result

        if isinstance(result, Failure):
            self._show_error(result.error)
        else:
            self._show_result(result)

    def _show_empty_state(self):
        self.match_count_label.setText("")
        self.match_count_label.setStyleSheet(MATCH_COUNT_STYLE)
        if self.preview_edit is not None:
            self.preview_edit.setPlainText("Enter a search pattern to see preview")

    def _show_error(self, error):
        self.match_count_label.setText(f"Error: {error}")
        self.match_count_label.setStyleSheet(ERROR_LABEL_STYLE)
        if self.preview_edit is not None:
            self.preview_edit.clear()

    def _show_result(self, result):
        self.match_count_label.setStyleSheet(MATCH_COUNT_STYLE)
        self.match_count_label.setText(f"{result.match_count} match(es) found")

        if self.preview_edit is None:
            return

        if result.match_count == 0:
            self.preview_edit.setPlainText("No matches found")
            return

        self.preview_edit.setHtml(self.render_preview_html(result))

    def render_preview_html(self, result):
        """Build the Before/After/match-list HTML for a ReplaceResult"""
        preview = build_preview(result, PREVIEW_MAX_LENGTH)
        before = segments_to_html(preview.original, preview.original_truncated)
        after = segments_to_html(preview.replaced, preview.replaced_truncated)
        return (
            f'<div><b>Before:</b><div style="{PREVIEW_TEXT_STYLE}">{before}</div></div>'
            f'<div><b>After:</b><div style="{PREVIEW_TEXT_STYLE}">{after}</div></div>'
            f'{self.render_match_list_html(result.matches)}'
        )

    def render_match_list_html(self, matches):
        """List the first matches as "match" → "replacement" """
        if not matches:
            return ''

        items = []
        for m in matches[:MATCH_LIST_LIMIT]:
            match_text = html.escape(truncate(m.match, MATCH_TEXT_MAX_LENGTH))
            replacement_text = html.escape(truncate(m.replacement, MATCH_TEXT_MAX_LENGTH))
            items.append(
                f'<li><span style="{MATCH_HIGHLIGHT_STYLE}">"{match_text}"</span>'
                f' → <span style="{REPLACEMENT_HIGHLIGHT_STYLE}">"{replacement_text}"</span></li>'
            )
        if len(matches) > MATCH_LIST_LIMIT:
            items.append(f'<li><i>... and {len(matches) - MATCH_LIST_LIMIT} more</i></li>')

        return f'<div><b>{len(matches)} match(es):</b><ul>{"".join(items)}</ul></div>'

    def perform_replace(self):
        """Replace all matches in the document (or selection) and remember the pattern"""
        pattern = self.search_input.text()
        replacement = self.replace_input.text()
        flags = self.get_flags()

        if not pattern:
            self.status_label.setText("Please enter a search pattern")
            return

        text = self.get_text()
        result = RegexEngine.execute(text, pattern, replacement, flags)
        if isinstance(result, Failure):
            self.status_label.setText(f"Error: {result.error}")
            return

        preview = RegexEngine.preview(text, pattern, replacement, flags)
        match_count = 0 if isinstance(preview, Failure) else preview.match_count
        if 'g' not in flags:
            match_count = min(match_count, 1)

        self._apply_replacement(result)
        self.settings_manager.add_to_history(pattern, replacement, flags)

        self.status_label.setText(f"Replaced {match_count} match(es)")
        self.replaced.emit(match_count)
        self.accept()

    def _apply_replacement(self, result):
        cursor = self.text_edit.textCursor()
        if self.selection_only and cursor.hasSelection():
            cursor.insertText(result)
            return

        position = cursor.position()
        self.text_edit.setPlainText(result)
        position = min(position, self.text_edit.document().characterCount() - 1)
        cursor = self.text_edit.textCursor()
        cursor.setPosition(position)
        self.text_edit.setTextCursor(cursor)

    def showEvent(self, event):
        """Focus search input when dialog is shown"""
        super().showEvent(event)
        self.search_input.setFocus()
        self.search_input.selectAll()
