"""
Constants used throughout the Regex Replace application.
"""

# Error reported when a pattern/flags pair cannot be compiled
INVALID_PATTERN_ERROR = "Invalid regular expression"

# Flag characters the dialog exposes (g=global, i=ignore case, m=multiline)
SUPPORTED_FLAGS = "gim"

# Settings defaults
DEFAULT_FLAGS = "g"
DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 50
HISTORY_LIMIT_STEP = 5

# Preview limits
PREVIEW_MAX_LENGTH = 1000      # Characters shown in each before/after view
MATCH_LIST_LIMIT = 10          # Matches listed under the preview
MATCH_TEXT_MAX_LENGTH = 30     # Characters shown per matched/replacement text
SELECTION_PREFILL_LIMIT = 100  # Longer selections are not copied into the search field

TRUNCATION_MARKER = "..."
