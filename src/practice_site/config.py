"""
Configuration module for the practice site.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PACKAGED_SITE_DIR = Path(__file__).parent / "site"


@dataclass
class SiteConfig:
    """Configuration settings for the practice site."""

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    site_dir: str = str(PACKAGED_SITE_DIR)
    debug: bool = False

    # Dynamic content settings (seconds)
    dynamic_delay: float = 2.0
    dynamic_jitter: float = 0.0

    # Navigation
    welcome_path: str = "/auth/welcome.html"

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "SiteConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            host=os.getenv("PRACTICE_SITE_HOST", _defaults.host),
            port=int(os.getenv("PRACTICE_SITE_PORT", str(_defaults.port))),
            site_dir=os.getenv("PRACTICE_SITE_DIR", _defaults.site_dir),
            debug=os.getenv("PRACTICE_SITE_DEBUG", str(_defaults.debug).lower()).lower() == "true",
            dynamic_delay=float(os.getenv("PRACTICE_SITE_DYNAMIC_DELAY", str(_defaults.dynamic_delay))),
            dynamic_jitter=float(os.getenv("PRACTICE_SITE_DYNAMIC_JITTER", str(_defaults.dynamic_jitter))),
            log_level=os.getenv("PRACTICE_SITE_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = SiteConfig.from_env()


def get_config() -> SiteConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> SiteConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
