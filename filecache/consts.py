from datetime import UTC, datetime

# Base path of all stores; relative paths resolve against the document root
DEFAULT_CACHE_PATH = "../private/lib/filecache"

# Checked in order when no document root is passed explicitly
DOCUMENT_ROOT_ENV_VARS = ("FILECACHE_DOCUMENT_ROOT", "DOCUMENT_ROOT")

# Directory layout below the base path
STORES_DIR = "stores"
TMP_DIR = "tmp"
CANDIDATES_DIR = "candidates"
BACKUP_DIR = "backup"
SETTINGS_EXTENSION = ".json"

# Key and store name validation
KEY_LENGTH_MIN = 2
KEY_LENGTH_MAX = 64
KEY_LONG_LENGTH_MAX = 128  # Long-key stores only
KEY_VALID_NON_ALPHANUM = frozenset("-.[]_")

# Time-to-live
TTL_NONE = 0  # Forever
FIXED_TTL_DEFAULT = 30 * 60
GRACE_FACTOR = 0.5  # Share of ttl_default an expired item survives on disk
GRACE_FALLBACK_SECONDS = 15 * 60  # Grace when ttl_default is zero

# mtime given to items that never expire
FOREVER_TIMESTAMP = int(datetime(2100, 1, 1, tzinfo=UTC).timestamp())

# Backup names generated when none is given
BACKUP_NAME_FORMAT = "%Y%m%d_%H%M%S"
