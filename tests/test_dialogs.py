"""
Tests for the dialog classes in windows/dialogs.py
"""

from managers.settings import SettingsManager
from windows.dialogs import SettingsDialog


class TestSettingsDialog:
    """Tests for SettingsDialog"""

    def test_initialization(self, qapp, settings_manager):
        """Test dialog shows the current settings"""
        dialog = SettingsDialog(settings_manager)

        assert dialog.windowTitle() == "Regex Replace Settings"
        assert dialog.flags_input.text() == 'g'
        assert dialog.preview_checkbox.isChecked() is True
        assert dialog.history_limit_spin.value() == 10
        assert dialog.history_limit_spin.maximum() == 50
        assert dialog.history_status.text() == "0 saved pattern(s)"

        dialog.close()

    def test_accept_saves_values(self, qapp, settings_manager, settings_file):
        """Test accepted values are sanitized and persisted"""
        dialog = SettingsDialog(settings_manager)

        dialog.flags_input.setText('gixm')
        dialog.preview_checkbox.setChecked(False)
        dialog.history_limit_spin.setValue(5)
        dialog._on_accept()

        assert settings_manager.default_flags == 'gim'
        assert settings_manager.show_preview is False
        assert settings_manager.history_limit == 5
        assert dialog.flags_input.text() == 'gim'

        reloaded = SettingsManager(settings_file)
        reloaded.load()
        assert reloaded.default_flags == 'gim'
        assert reloaded.history_limit == 5

    def test_lower_limit_trims_history(self, qapp, settings_manager):
        for i in range(8):
            settings_manager.add_to_history(f'p{i}', 'r', 'g')
        dialog = SettingsDialog(settings_manager)

        dialog.history_limit_spin.setValue(5)
        dialog._on_accept()

        assert len(settings_manager.recent_patterns) == 5

    def test_clear_history_button(self, qapp, settings_manager):
        settings_manager.add_to_history('a', '1', 'g')
        dialog = SettingsDialog(settings_manager)
        assert dialog.history_status.text() == "1 saved pattern(s)"

        dialog.clear_history_btn.click()

        assert settings_manager.recent_patterns == []
        assert dialog.history_status.text() == "0 saved pattern(s)"
        dialog.close()

    def test_cancel_keeps_settings(self, qapp, settings_manager):
        dialog = SettingsDialog(settings_manager)
        dialog.flags_input.setText('i')
        dialog.reject()

        assert settings_manager.default_flags == 'g'
