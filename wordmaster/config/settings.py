"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


@dataclass
class Config:
    """Application-wide configuration."""

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of wordmaster/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()
    DATA_DIR: str = str(BASE_DIR / "data")

    # Local key-value store holding the word collection
    STORAGE_FILE: str = os.environ.get(
        "WORDMASTER_STORAGE_FILE", str(BASE_DIR / "data" / "storage.json")
    )
    STORAGE_KEY: str = "wordMasterData"
    SETTINGS_FILE: str = str(BASE_DIR / "data" / "settings.json")

    # Import format: "term;definition", split on the first delimiter only
    FIELD_DELIMITER: str = ";"
    IMPORT_EXTENSIONS: tuple = (".txt",)

    # Logging
    LOG_LEVEL: str = os.environ.get("WORDMASTER_LOG_LEVEL", "INFO")
    LOG_FILE: str = os.environ.get("WORDMASTER_LOG_FILE", "")
