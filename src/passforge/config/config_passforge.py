# config_passforge.py
"""
Configuration constants
"""
import os
import string
from pathlib import Path
# ==============================================================
# Application settings
# ==============================================================
# Software version
VERSION = "1.0.0"

# Data directory. PASSFORGE_HOME overrides the default location.
BASE_DIR = Path(os.environ.get("PASSFORGE_HOME", Path.home() / ".passforge"))
EXPORT_DIR = Path.cwd()

# ==============================================================
# History settings
# ==============================================================
# Name of the key/value slot that holds the history ledger
HISTORY_SLOT = "passwordHistory"
MAX_HISTORY = 50                 # Oldest entries are evicted beyond this

# Random suffix of generated history ids (bytes, hex encoded)
ID_SUFFIX_LEN = 4

# ==============================================================
# Character classes - DO NOT CHANGE (entropy math relies on sizes)
# ==============================================================
LOWERCASE = string.ascii_lowercase   # 26
UPPERCASE = string.ascii_uppercase   # 26
DIGITS = string.digits               # 10
SYMBOLS = string.punctuation         # 32

# ==============================================================
# Policy bounds
# ==============================================================
MIN_LENGTH = 4
MAX_LENGTH = 64
MIN_WORDS = 2
MAX_WORDS = 8
MIN_BATCH = 1
MAX_BATCH = 50

SEPARATORS = ("-", "_", ".", " ", "")
NUMBER_PLACEMENTS = ("none", "prefix", "suffix", "between")

# ==============================================================
# Generation defaults
# ==============================================================
PASS_DEFAULTS = {
    "length": 16,
    "lowercase": True,
    "uppercase": True,
    "numbers": True,
    "symbols": True,
}
PHRASE_DEFAULTS = {
    "word_count": 4,
    "list_id": "common",
    "separator": "-",
    "capitalize": True,
    "number_placement": "suffix",
}
BATCH_DEFAULT = 5

# ==============================================================
# Strength estimation
# ==============================================================
GUESSES_PER_SECOND = 10_000_000_000  # Offline fast hashing attacker
ZXCVBN_MAX_LENGTH = 100

# ==============================================================
# Clipboard
# ==============================================================
CLIPBOARD_TIMEOUT = 30               # Seconds before auto-clear

# ==============================================================
# Display & formatting
# ==============================================================
UTF8 = "utf-8"
DT_FORMAT = "MMM D, YYYY hh:mm:ss A"
DT_FORMAT_EXPORT = 'YYYY_MM_DD_HH_mm_ss'
MASK_CHAR = "•"
CLEAR_SCREEN = True

# separator
SEP_LG = "=" * 50
SEP_SM = "-" * 50

# ==============================================================
# Optional: local overrides
# Local configuration file overrides standard config values

# ==============================================================
try:
    from passforge.config.config_local import *
except ImportError:
    pass  # No local config - use defaults above
