"""
indexedRAG - Utility Functions and Configuration Management
"""

import os
import sys
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from loguru import logger


APP_QUALIFIER = "pl"
APP_ORGANIZATION = "aaugustyniak"
APP_NAME = "indexedRAG"
DB_FILE_NAME = "indexedRAG.db"


class Settings(BaseSettings):
    """
    Application settings - loaded from INDEXEDRAG_* environment variables and .env
    """
    # Database location override (platform config dir when unset)
    db_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Window
    window_width: int = 1000
    window_height: int = 800
    appearance_mode: str = "dark"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="INDEXEDRAG_",
        case_sensitive=False,
        extra="ignore",
    )


def setup_logger(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure Loguru logger
    """
    logger.remove()  # Remove default handler

    # Colored console logging
    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=log_level
    )

    # File logging
    logger.add(
        str(Path(log_dir) / "indexedrag_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="7 days",
        level=log_level
    )

    return logger


def get_settings() -> Settings:
    """
    Load and return application settings
    """
    try:
        settings = Settings()
        return settings
    except Exception as e:
        print(f"❌ Failed to load settings: {e}")
        print("💡 Please check your INDEXEDRAG_* environment variables and .env file.")
        sys.exit(1)


def get_config_dir(platform: str = None, env: dict = None, home: Path = None) -> Optional[Path]:
    """
    Return the platform-appropriate configuration directory:
     - Linux:   $XDG_CONFIG_HOME/indexedrag or ~/.config/indexedrag
     - Windows: %APPDATA%\\aaugustyniak\\indexedRAG\\config
     - macOS:   ~/Library/Application Support/pl.aaugustyniak.indexedRAG

    Returns None when no home directory can be determined.
    """
    platform = platform or sys.platform
    env = os.environ if env is None else env

    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            home = None

    if platform.startswith("win"):
        appdata = env.get("APPDATA")
        if appdata:
            base = Path(appdata)
        elif home is not None:
            base = home / "AppData" / "Roaming"
        else:
            return None
        return base / APP_ORGANIZATION / APP_NAME / "config"

    if platform == "darwin":
        if home is None:
            return None
        return home / "Library" / "Application Support" / f"{APP_QUALIFIER}.{APP_ORGANIZATION}.{APP_NAME}"

    xdg = env.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        base = Path(xdg)
    elif home is not None:
        base = home / ".config"
    else:
        return None
    return base / APP_NAME.lower()


def get_db_path(settings: Settings = None) -> Path:
    """
    Resolve the database file path, honouring the INDEXEDRAG_DB_PATH override
    """
    settings = settings or get_settings()
    if settings.db_path:
        return Path(settings.db_path).expanduser()

    config_dir = get_config_dir()
    if config_dir is None:
        logger.warning("⚠️ No config directory available, using current directory")
        return Path(DB_FILE_NAME)
    return config_dir / DB_FILE_NAME
