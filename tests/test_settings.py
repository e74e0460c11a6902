"""
Tests for the SettingsManager class in managers/settings.py
"""

import json
import os

import pytest

from managers.settings import SettingsManager, default_settings, sanitize_flags


class TestSettingsManager:
    """Tests for loading and saving"""

    @pytest.fixture
    def manager(self, settings_file):
        """Create a fresh SettingsManager for each test"""
        return SettingsManager(settings_file)

    def test_initialization(self, manager, settings_file):
        """Test manager initializes with defaults"""
        assert manager.settings_file == settings_file
        assert manager.settings == default_settings()

    def test_load_nonexistent_file(self, manager):
        """Test loading from non-existent file returns defaults"""
        result = manager.load()
        assert result == {
            'default_flags': 'g',
            'history_limit': 10,
            'show_preview': True,
            'recent_patterns': [],
        }

    def test_save_and_load(self, manager, settings_file):
        """Test saving and loading settings"""
        manager.set('default_flags', 'gi')
        manager.set('show_preview', False)
        manager.save()

        other = SettingsManager(settings_file)
        result = other.load()

        assert result['default_flags'] == 'gi'
        assert result['show_preview'] is False
        assert result['history_limit'] == 10

    def test_save_explicit_dict(self, manager, settings_file):
        manager.save({'default_flags': 'm'})
        with open(settings_file, 'r', encoding='utf-8') as f:
            assert json.load(f) == {'default_flags': 'm'}

    def test_load_merges_defaults(self, manager, settings_file):
        """Missing keys in the file fall back to defaults"""
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump({'history_limit': 3}, f)

        result = manager.load()
        assert result['history_limit'] == 3
        assert result['default_flags'] == 'g'
        assert result['recent_patterns'] == []

    def test_load_corrupt_file(self, manager, settings_file, capsys):
        """Test corrupt JSON falls back to defaults"""
        with open(settings_file, 'w', encoding='utf-8') as f:
            f.write('{not json')

        result = manager.load()
        assert result == default_settings()
        assert 'Failed to load settings' in capsys.readouterr().out

    def test_load_non_dict_json(self, manager, settings_file):
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(['a', 'b'], f)

        assert manager.load() == default_settings()

    def test_save_to_missing_directory(self, temp_dir, capsys):
        manager = SettingsManager(os.path.join(temp_dir, 'missing', 'settings.json'))
        manager.save()
        assert 'Failed to save settings' in capsys.readouterr().out

    def test_get_with_default(self, manager):
        assert manager.get('nonexistent') is None
        assert manager.get('nonexistent', 'default') == 'default'

    def test_defaults_not_shared(self):
        first = default_settings()
        first['recent_patterns'].append({'search': 'a'})
        assert default_settings()['recent_patterns'] == []


class TestPreferences:
    """Tests for flag, preview and limit preferences"""

    def test_sanitize_flags(self):
        assert sanitize_flags('gxiqm') == 'gim'
        assert sanitize_flags('ggii') == 'gi'
        assert sanitize_flags('') == ''
        assert sanitize_flags(None) == ''

    def test_set_default_flags(self, settings_manager, settings_file):
        settings_manager.set_default_flags('i g!')
        assert settings_manager.default_flags == 'ig'

        reloaded = SettingsManager(settings_file)
        reloaded.load()
        assert reloaded.default_flags == 'ig'

    def test_set_show_preview(self, settings_manager):
        settings_manager.set_show_preview(False)
        assert settings_manager.show_preview is False

    def test_set_history_limit_clamps(self, settings_manager):
        settings_manager.set_history_limit(500)
        assert settings_manager.history_limit == 50
        settings_manager.set_history_limit(-3)
        assert settings_manager.history_limit == 0

    def test_set_history_limit_trims(self, settings_manager):
        for i in range(5):
            settings_manager.add_to_history(f's{i}', 'r', 'g', timestamp=i)

        settings_manager.set_history_limit(2)

        assert [p['search'] for p in settings_manager.recent_patterns] == ['s4', 's3']


class TestPatternHistory:
    """Tests for the recent pattern list"""

    def test_add_to_history(self, settings_manager):
        settings_manager.add_to_history('\\d+', 'NUM', 'g', timestamp=1000)

        assert settings_manager.recent_patterns == [
            {'search': '\\d+', 'replace': 'NUM', 'flags': 'g', 'timestamp': 1000}
        ]

    def test_most_recent_first(self, settings_manager):
        settings_manager.add_to_history('a', '1', 'g')
        settings_manager.add_to_history('b', '2', 'g')

        assert [p['search'] for p in settings_manager.recent_patterns] == ['b', 'a']

    def test_duplicate_moves_to_front(self, settings_manager):
        settings_manager.add_to_history('a', '1', 'g', timestamp=1)
        settings_manager.add_to_history('b', '2', 'g', timestamp=2)
        settings_manager.add_to_history('a', '1', 'gi', timestamp=3)

        patterns = settings_manager.recent_patterns
        assert [p['search'] for p in patterns] == ['a', 'b']
        assert patterns[0]['flags'] == 'gi'
        assert patterns[0]['timestamp'] == 3

    def test_same_search_different_replace_kept(self, settings_manager):
        settings_manager.add_to_history('a', '1', 'g')
        settings_manager.add_to_history('a', '2', 'g')

        assert len(settings_manager.recent_patterns) == 2

    def test_history_limit_respected(self, settings_manager):
        for i in range(15):
            settings_manager.add_to_history(f'p{i}', 'r', 'g')

        patterns = settings_manager.recent_patterns
        assert len(patterns) == 10
        assert patterns[0]['search'] == 'p14'

    def test_zero_limit_keeps_nothing(self, settings_manager):
        settings_manager.set_history_limit(0)
        settings_manager.add_to_history('a', '1', 'g')
        assert settings_manager.recent_patterns == []

    def test_timestamp_defaults_to_now(self, settings_manager):
        settings_manager.add_to_history('a', '1', 'g')
        assert settings_manager.recent_patterns[0]['timestamp'] > 0

    def test_history_persisted(self, settings_manager, settings_file):
        settings_manager.add_to_history('a', '1', 'g', timestamp=5)

        reloaded = SettingsManager(settings_file)
        reloaded.load()
        assert reloaded.recent_patterns[0]['search'] == 'a'

    def test_clear_history(self, settings_manager):
        settings_manager.add_to_history('a', '1', 'g')
        settings_manager.clear_history()
        assert settings_manager.recent_patterns == []
