# phonebook_core/config.py
"""
Central runtime configuration for the phonebook.
Simple, environment-variable-driven defaults. Import wherever you need
them; read at import time.
"""

import os


def _env_bool(key: str, default: bool) -> bool:
    return os.environ.get(key, str(int(default))).lower() in ("1", "true", "yes")


# Optional YAML/JSON file overriding prompts, help text and diagnostics.
# If absent, the built-in catalog is used.
PHONEBOOK_MESSAGES_PATH = os.environ.get("PHONEBOOK_MESSAGES_PATH", "config/messages.yaml")

# Log level used by the console entry point. WARNING keeps stdout clean.
PHONEBOOK_LOG_LEVEL = os.environ.get("PHONEBOOK_LOG_LEVEL", "WARNING").upper()

# Escape quotes/backslashes/control chars in exported JSON strings.
# Default false: export output stays byte-compatible with the old files.
PHONEBOOK_JSON_ESCAPE = _env_bool("PHONEBOOK_JSON_ESCAPE", False)
