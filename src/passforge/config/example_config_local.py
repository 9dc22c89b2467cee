# Local configuration file overrides standard config values - never commit this file!
# Used for changing user defaults
from passforge.config.config_passforge import PASS_DEFAULTS, PHRASE_DEFAULTS

CLIPBOARD_TIMEOUT = 20
PASS_DEFAULTS["length"] = 24
PHRASE_DEFAULTS["separator"] = "_"
CLEAR_SCREEN = False

# Rename this file to config_local.py to enable it
