"""
Settings Manager for Regex Replace.
Handles loading/saving preferences and the recent pattern history.
"""

import os
import json
import time

from constants import (
    DEFAULT_FLAGS, DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT, SUPPORTED_FLAGS
)


DEFAULT_SETTINGS = {
    'default_flags': DEFAULT_FLAGS,
    'history_limit': DEFAULT_HISTORY_LIMIT,
    'show_preview': True,
    'recent_patterns': [],
}


def default_settings():
    """Return a fresh copy of the default settings."""
    settings = dict(DEFAULT_SETTINGS)
    settings['recent_patterns'] = []
    return settings


def sanitize_flags(flags):
    """Keep only the flag characters the dialog supports, without repeats."""
    result = ''
    for ch in flags or '':
        if ch in SUPPORTED_FLAGS and ch not in result:
            result += ch
    return result


class SettingsManager:
    """Manages application settings persistence."""

    def __init__(self, settings_file):
        self.settings_file = settings_file
        self._settings = default_settings()

    @property
    def settings(self):
        return self._settings

    def load(self):
        """Load settings from file, filling gaps with defaults.

        Returns:
            dict: Settings dictionary (defaults if the file is missing or unreadable)
        """
        self._settings = default_settings()
        if not os.path.exists(self.settings_file):
            return self._settings

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Failed to load settings: {e}")
            return self._settings

        if isinstance(data, dict):
            self._settings.update(data)
        return self._settings

    def save(self, settings=None):
        """Save settings to file.

        Args:
            settings: dict of settings to save (defaults to the current settings)
        """
        if settings is None:
            settings = self._settings
        try:
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            self._settings = settings
        except OSError as e:
            print(f"Failed to save settings: {e}")

    def get(self, key, default=None):
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            The setting value or default
        """
        return self._settings.get(key, default)

    def set(self, key, value):
        self._settings[key] = value

    @property
    def default_flags(self):
        return self._settings.get('default_flags', DEFAULT_FLAGS)

    @property
    def history_limit(self):
        return self._settings.get('history_limit', DEFAULT_HISTORY_LIMIT)

    @property
    def show_preview(self):
        return self._settings.get('show_preview', True)

    @property
    def recent_patterns(self):
        return self._settings.setdefault('recent_patterns', [])

    def set_default_flags(self, flags):
        """Store default flags, dropping anything other than g, i and m."""
        self._settings['default_flags'] = sanitize_flags(flags)
        self.save()

    def set_show_preview(self, show):
        self._settings['show_preview'] = bool(show)
        self.save()

    def set_history_limit(self, limit):
        """Set the history size (clamped to 0..MAX_HISTORY_LIMIT) and trim the history."""
        limit = max(0, min(int(limit), MAX_HISTORY_LIMIT))
        self._settings['history_limit'] = limit
        self._settings['recent_patterns'] = self.recent_patterns[:limit]
        self.save()

    def add_to_history(self, search, replace, flags, timestamp=None):
        """Remember a pattern, most recent first.

        An entry with the same search and replace text is moved to the front
        instead of being duplicated. The list is trimmed to history_limit.
        """
        if timestamp is None:
            timestamp = int(time.time() * 1000)

        entry = {
            'search': search,
            'replace': replace,
            'flags': flags,
            'timestamp': timestamp,
        }
        history = [
            p for p in self.recent_patterns
            if p.get('search') != search or p.get('replace') != replace
        ]
        history.insert(0, entry)
        self._settings['recent_patterns'] = history[:self.history_limit]
        self.save()

    def clear_history(self):
        self._settings['recent_patterns'] = []
        self.save()
