# core/config_loader.py

import json
import os
from pathlib import Path
from dotenv import load_dotenv
from core.config_schema import PrompterConfig
from core.paths import CONFIG_JSON_PATH, DOTENV_PATH

# Defaults, overridable per call
DEFAULT_CONFIG_PATH = CONFIG_JSON_PATH
DEFAULT_ENV_PATH = DOTENV_PATH

# env var -> key inside the "logging" section
ENV_OVERRIDES = {
    "PROMPTER_LOG_ENABLED": "enabled",
    "PROMPTER_LOG_DIR": "log_dir",
    "PROMPTER_LOG_FILE": "file_name",
    "PROMPTER_LOG_MAX_BYTES": "max_bytes",
    "PROMPTER_REDACT_ANSWERS": "redact_answers",
}


def load_raw_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """
    The JSON file is optional; a missing file means built-in defaults.
    """
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return raw


def apply_env_overrides(raw: dict) -> dict:
    logging_section = dict(raw.get("logging") or {})
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            # pydantic coerces "1"/"true"/"1024" etc. during validation
            logging_section[key] = value.strip()
    merged = dict(raw)
    merged["logging"] = logging_section
    return merged


def load_config(path: Path = DEFAULT_CONFIG_PATH, env_path: Path = DEFAULT_ENV_PATH) -> PrompterConfig:
    """
    Loads environment variables and the optional JSON config, applies
    PROMPTER_* overrides, validates against schema, and returns a typed
    PrompterConfig instance.
    """
    # Load .env early so any env overrides are present
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()

    try:
        raw = apply_env_overrides(load_raw_config(path))
        return PrompterConfig(**raw)
    except Exception as e:
        # Fail fast with clear message
        raise RuntimeError(f"Configuration validation failed: {e}") from e
