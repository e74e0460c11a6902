"""
Pytest configuration and fixtures for Regex Replace tests.
"""

import pytest
import sys
import os
from pathlib import Path
import tempfile
import shutil
from unittest.mock import patch

# Add parent directory to path so we can import the modules
sys.path.insert(0, str(Path(__file__).parent.parent))

# Run Qt without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PyQt6.QtWidgets import QApplication, QMessageBox

from managers.settings import SettingsManager


@pytest.fixture(scope='session')
def qapp():
    """Create QApplication instance for all tests"""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit the app here as it may be used by multiple tests


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    # Cleanup after test
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def settings_file(temp_dir):
    """Path of a settings file inside the temp directory"""
    return os.path.join(temp_dir, '.regex_replace_settings.json')


@pytest.fixture
def settings_manager(settings_file):
    """A SettingsManager with default settings backed by a temp file"""
    manager = SettingsManager(settings_file)
    manager.load()
    return manager


@pytest.fixture
def mock_messagebox():
    """Mock QMessageBox to prevent dialogs during tests"""
    with patch.object(QMessageBox, 'critical', return_value=None):
        with patch.object(QMessageBox, 'warning', return_value=None):
            with patch.object(QMessageBox, 'information', return_value=None):
                yield


@pytest.fixture
def sample_text():
    """Provide sample text for testing"""
    return """The quick brown fox jumps over the lazy dog.
Dates: 2024-12-08 and 2023-01-15.
The Quick Brown Fox is different from the quick brown fox.
Prices: $100 and $200.
"""
