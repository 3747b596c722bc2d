"""
Package Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden through environment variables or a .env file
"""

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_ENV = 'production'

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

# Extensions searched by the view finder, in priority order
DEFAULT_VIEW_EXTENSIONS = ['blade.html', 'html', 'css']

# Extension -> engine mapping used by the view factory
DEFAULT_VIEW_ENGINE_EXTENSIONS = {
    'blade.html': 'blade',
    'html': 'file',
    'css': 'file',
}

# Blade echoes ({{ ... }}) are HTML-escaped
DEFAULT_VIEW_AUTOESCAPE = True

# Recompile views whose source changed since the last compile
DEFAULT_VIEW_CHECK_CACHE = True

# Compiled views are stored as importable Python source
DEFAULT_VIEW_COMPILED_EXTENSION = 'py'

# Separator between a namespace hint and the view name ("mail::welcome")
DEFAULT_VIEW_HINT_DELIMITER = '::'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_NAME = 'laraview'
DEFAULT_LOG_FORMAT = 'text'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
