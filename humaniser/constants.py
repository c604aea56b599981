"""Global constants for humaniser"""

from enum import Enum
import os

APP_NAME = "humaniser"
LOG_FORMAT = "%(message)s"

# Output styles
class OutputFormat(Enum):
    CONCISE = "concise"
    FULL = "full"


# Size unit systems
class UnitSystem(Enum):
    BINARY = "binary"    # IEC, 1024-based
    DECIMAL = "decimal"  # SI, 1000-based

    @property
    def step(self) -> int:
        return 1024 if self is UnitSystem.BINARY else 1000


# Permission rendering styles
class PermissionStyle(Enum):
    UNIX = "unix"
    DESCRIPTIVE = "descriptive"


# Chosen once per process, the way a build target would pick it
PLATFORM_PERMISSION_STYLE = (
    PermissionStyle.DESCRIPTIVE if os.name == "nt" else PermissionStyle.UNIX
)

# Rounding
DEFAULT_DIGITS = 1
DEFAULT_PERCENT_PRECISION = 1

# Count ladder: (concise symbol, full word), one rung per power of 1000
COUNT_UNITS = [
    ("", ""),
    ("K", "thousand"),
    ("M", "million"),
    ("B", "billion"),
    ("T", "trillion"),
    ("Q", "quadrillion"),
    ("Qi", "quintillion"),
]

# Size ladders: (concise symbol, singular word)
BINARY_SIZE_UNITS = [
    ("B", "byte"),
    ("KiB", "kibibyte"),
    ("MiB", "mebibyte"),
    ("GiB", "gibibyte"),
    ("TiB", "tebibyte"),
    ("PiB", "pebibyte"),
    ("EiB", "exbibyte"),
    ("ZiB", "zebibyte"),
    ("YiB", "yobibyte"),
]

DECIMAL_SIZE_UNITS = [
    ("B", "byte"),
    ("KB", "kilobyte"),
    ("MB", "megabyte"),
    ("GB", "gigabyte"),
    ("TB", "terabyte"),
    ("PB", "petabyte"),
    ("EB", "exabyte"),
    ("ZB", "zettabyte"),
    ("YB", "yottabyte"),
]

# Time constants (seconds)
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400
SECONDS_PER_WEEK = 604_800
SECONDS_PER_MONTH = 2_592_000  # 30 days
SECONDS_PER_YEAR = 31_536_000  # 365 days

JUST_NOW_THRESHOLD = 10  # seconds

# Relative duration buckets: (upper bound exclusive, divisor, concise suffix, singular word)
DURATION_BUCKETS = [
    (SECONDS_PER_MINUTE, 1, "s", "second"),
    (SECONDS_PER_HOUR, SECONDS_PER_MINUTE, "m", "minute"),
    (SECONDS_PER_DAY, SECONDS_PER_HOUR, "h", "hour"),
    (SECONDS_PER_WEEK, SECONDS_PER_DAY, "d", "day"),
    (SECONDS_PER_MONTH, SECONDS_PER_WEEK, "w", "week"),
    (SECONDS_PER_YEAR, SECONDS_PER_MONTH, "mo", "month"),
    (None, SECONDS_PER_YEAR, "y", "year"),
]

# Sentinels
MISSING_CONCISE = "-"
MISSING_FULL = "never"
JUST_NOW = "just now"
YESTERDAY = "yesterday"
TOMORROW = "tomorrow"
PAST_SUFFIX = "ago"
FUTURE_SUFFIX = "from now"
FUTURE_PREFIX = "in"
NOT_A_NUMBER = "-"
NO_PERMISSIONS = "None"

# Permission labels
PRINCIPAL_LABELS = ("User", "Group", "Other")
PERMISSION_LABELS = ("Read", "Write", "Execute")
PERMISSION_CHARS = ("r", "w", "x")

# Configuration
CONFIG_FILE_NAME = ".humaniser.yaml"

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "style": {"type": "string", "enum": [f.value for f in OutputFormat]},
        "size_system": {"type": "string", "enum": [s.value for s in UnitSystem]},
        "percent_precision": {"type": "integer", "minimum": 0},
        "permission_style": {
            "type": "string",
            "enum": ["auto"] + [s.value for s in PermissionStyle],
        },
    },
    "additionalProperties": False,
}

# Error codes
class ErrorCode:
    INVALID_INPUT = "HU001"
    CONFIG_FORMAT_ERROR = "HU002"
    CONFIG_VALIDATION_FAILED = "HU003"

# Environment variables
ENV_CONFIG_PATH = "HUMANISER_CONFIG"
ENV_LOG_LEVEL = "HUMANISER_LOG_LEVEL"
