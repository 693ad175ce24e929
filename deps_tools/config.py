import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class Settings:
    assume_yes: bool = False      # answer the install prompt with yes
    refresh_index: bool = True    # run the platform's package-index refresh first
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment (DEP_SETUP_* variables)."""
    return Settings(
        assume_yes=_env_flag("DEP_SETUP_ASSUME_YES", False),
        refresh_index=_env_flag("DEP_SETUP_REFRESH_INDEX", True),
        log_level=os.getenv("DEP_SETUP_LOG_LEVEL", "INFO").upper(),
    )
