import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import err_console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "CUTTLEBELLE_VERBOSE": "false",
    "CUTTLEBELLE_SILENT": "false",
}

# File Paths
CUTTLEBELLE_DIR = Path(os.getenv("CUTTLEBELLE_DIR", str(Path.home() / ".cuttlebelle")))
CONFIG_FILE = Path(os.getenv("CUTTLEBELLE_CONFIG_FILE", str(CUTTLEBELLE_DIR / "config.json")))


def load_config(filepath: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = filepath or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except (OSError, json.JSONDecodeError) as e:
            err_console.print(f"[yellow]Warning: Could not load config file {path}: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, filepath: Path | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config(filepath)
    if key in config:
        return str(config[key]).lower() if isinstance(config[key], bool) else str(config[key])

    # 3. Default
    return default


def get_bool_setting(key: str, default: bool, filepath: Path | None = None) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower(), filepath)
    return value.lower() in ("true", "1", "yes", "on")


# Initialize Configuration
VERBOSE = get_bool_setting("CUTTLEBELLE_VERBOSE", False)
SILENT = get_bool_setting("CUTTLEBELLE_SILENT", False)
