"""
Centralized styles for the Regex Replace application.
Avoids duplication of CSS-like style strings across modules.
"""

# Toolbar button style
BUTTON_STYLE = """
    QPushButton {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #F8F8F8, stop:1 #E0E0E0);
        border: 1px solid #B0B0B0;
        border-radius: 6px;
        padding: 6px 12px;
        min-height: 24px;
        font-weight: bold;
    }
    QPushButton:hover {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #FFFFFF, stop:1 #E8E8E8);
        border: 1px solid #909090;
    }
    QPushButton:pressed {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #D0D0D0, stop:1 #C0C0C0);
        border: 1px solid #808080;
    }
"""

# Dialog button style (slightly smaller padding)
DIALOG_BUTTON_STYLE = """
    QPushButton {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #F8F8F8, stop:1 #E0E0E0);
        border: 1px solid #B0B0B0;
        border-radius: 4px;
        padding: 6px 16px;
        min-width: 60px;
        min-height: 22px;
    }
    QPushButton:hover {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #FFFFFF, stop:1 #E8E8E8);
        border: 1px solid #909090;
    }
    QPushButton:pressed {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #D0D0D0, stop:1 #C0C0C0);
        border: 1px solid #808080;
    }
"""

# Primary action button (Replace all)
PRIMARY_BUTTON_STYLE = """
    QPushButton {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #64B5F6, stop:1 #1E88E5);
        color: white;
        border: 1px solid #1565C0;
        border-radius: 4px;
        padding: 6px 16px;
        min-width: 60px;
        min-height: 22px;
        font-weight: bold;
    }
    QPushButton:hover {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #90CAF9, stop:1 #2196F3);
    }
    QPushButton:pressed {
        background-color: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                                          stop:0 #1E88E5, stop:1 #1565C0);
    }
"""

# Input field style
INPUT_STYLE = """
    QLineEdit {
        background-color: white;
        border: 1px solid #B0B0B0;
        border-radius: 3px;
        padding: 4px 8px;
        min-height: 20px;
    }
    QLineEdit:focus {
        border: 2px solid #2196F3;
    }
"""

# Match count label
MATCH_COUNT_STYLE = "color: #444444; font-weight: bold;"
ERROR_LABEL_STYLE = "color: #C62828; font-weight: bold;"

# Preview pane and its highlighted spans (inline HTML styles)
PREVIEW_STYLE = """
    QTextEdit {
        background-color: #FAFAFA;
        border: 1px solid #D0D0D0;
        border-radius: 3px;
    }
"""
MATCH_HIGHLIGHT_STYLE = "background-color: #FFFF00; color: #000000;"
REPLACEMENT_HIGHLIGHT_STYLE = "background-color: #C8E6C9; color: #1B5E20;"
TRUNCATED_STYLE = "color: #888888; font-style: italic;"
PREVIEW_TEXT_STYLE = "font-family: Consolas, monospace; white-space: pre-wrap;"
