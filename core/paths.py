# core/paths.py

import os
from pathlib import Path

# Base directory for all persistent data, overridable in tests
BASE_DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Structured event log NDJSON file + archive dir
STRUCT_LOG_DIR          = BASE_DATA_DIR / "logs"
STRUCT_LOG_FILE_NAME    = "prompter_events.ndjson"
STRUCT_LOG_ARCHIVE_NAME = "archived"

# Optional JSON config and dotenv locations, relative to the working dir
CONFIG_JSON_PATH = Path("config") / "prompter.json"
DOTENV_PATH      = Path("secrets") / ".env"
