"""Application settings loaded from the environment."""
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("photoset.config")

APP_DIR = Path(__file__).resolve().parent

REQUIRED_SETTINGS = (
    "PHOTOS_PUBLIC_BASE_URL",
    "PHOTOS_SRCSET_DIR",
    "PHOTOS_PRINT_SET_DIR",
)


class ConfigurationError(RuntimeError):
    """A required setting is missing or empty."""


@dataclass(frozen=True)
class Settings:
    """Where photos end up online and where each workflow scans for them."""
    public_base_url: str
    srcset_dir: Path
    print_set_dir: Path

    def __post_init__(self):
        # Folder names are appended directly to the base URL.
        object.__setattr__(
            self, "public_base_url", self.public_base_url.rstrip("/") + "/"
        )

    def scan_dir(self, workflow: str) -> Path:
        if workflow == "srcset":
            return self.srcset_dir
        if workflow == "print-set":
            return self.print_set_dir
        raise KeyError(workflow)


def load_settings(environ=None) -> Settings:
    """Build Settings from the environment, raising ConfigurationError on gaps."""
    if environ is None:
        load_dotenv(APP_DIR / ".env")
        environ = os.environ

    values = {}
    for name in REQUIRED_SETTINGS:
        value = (environ.get(name) or "").strip()
        if not value:
            raise ConfigurationError(f"Missing or empty config setting: {name}")
        values[name] = value

    settings = Settings(
        public_base_url=values["PHOTOS_PUBLIC_BASE_URL"],
        srcset_dir=Path(values["PHOTOS_SRCSET_DIR"]).expanduser(),
        print_set_dir=Path(values["PHOTOS_PRINT_SET_DIR"]).expanduser(),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """FastAPI dependency; settings are validated once and then reused."""
    return load_settings()
