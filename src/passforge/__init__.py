"""PassForge - offline password and passphrase generator."""
