"""
Application-level constants for hardcoded business logic.

These values define the catalog's data rules and public paths and are not
meant to be changed via environment variables. For configurable values
(database pool, log level, etc.), see catalog/settings.py.
"""

# ============================================================================
# URL layout
# ============================================================================

# Every catalog page lives under this prefix
CATALOG_URL_PREFIX = "/catalog"

# Collection view redirected to after delete/update
GENRE_LIST_URL = f"{CATALOG_URL_PREFIX}/genres"


# ============================================================================
# Field limits
# ============================================================================

GENRE_NAME_MIN_LENGTH = 3
GENRE_NAME_MAX_LENGTH = 100

AUTHOR_NAME_MAX_LENGTH = 100


# ============================================================================
# Logging
# ============================================================================

# Upper bound of a single JSON log line
MAX_LOG_SIZE_BYTES = 250_000
