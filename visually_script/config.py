import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseModel):
    json_indent: int = 2
    default_transition: str = "fade"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Settings read from VISUALLY_* environment variables (or .env)."""
    return Settings(
        json_indent=os.getenv("VISUALLY_JSON_INDENT", "2"),
        default_transition=os.getenv("VISUALLY_DEFAULT_TRANSITION", "fade"),
        log_level=os.getenv("VISUALLY_LOG_LEVEL", "INFO"),
    )


def configure_logging(settings: Settings = None):
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)
