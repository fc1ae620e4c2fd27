"""
Bridge Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in config/twigbridge.py,
config/view.py or .env
"""

# ============================================================================
# VIEW FINDER DEFAULTS
# ============================================================================

# Extensions searched by the finder, highest priority first
DEFAULT_VIEW_EXTENSIONS = ['blade.php', 'php', 'css']

# Namespace delimiters
DEFAULT_HINT_PATH_DELIMITER = '::'
DEFAULT_HINT_PATH_TWIG_DELIMITER = '@'

# ============================================================================
# TWIG DEFAULTS
# ============================================================================

# Extensions registered with the finder on boot (moved to the front)
DEFAULT_TWIG_FILE_EXTENSIONS = ['twig']

DEFAULT_TWIG_ENCODING = 'utf-8'

# Passed straight to jinja2.Environment
DEFAULT_TWIG_ENVIRONMENT = {
    'debug': False,
    'autoescape': True,
    'auto_reload': True,
}

# Jinja2 extension enabled when debug is on
DEFAULT_TWIG_DEBUG_EXTENSION = 'jinja2.ext.debug'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_NAME = 'twigbridge'
DEFAULT_LOG_FORMAT = 'json'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

# ============================================================================
# LINT DEFAULTS
# ============================================================================

DEFAULT_LINT_FORMAT = 'text'
DEFAULT_LINT_FORMATS = ('text', 'json')
