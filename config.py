"""
Server settings, read from COLOR_PICKER_* environment variables.
"""

import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=8973, ge=1, le=65535)
    log_level: str = "INFO"
    mcp: bool = True


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")


@lru_cache()
def get_settings() -> Settings:
    """Settings from the environment, falling back to defaults."""
    values = {}
    if "COLOR_PICKER_HOST" in os.environ:
        values["host"] = os.environ["COLOR_PICKER_HOST"]
    if "COLOR_PICKER_PORT" in os.environ:
        values["port"] = os.environ["COLOR_PICKER_PORT"]
    if "COLOR_PICKER_LOG_LEVEL" in os.environ:
        values["log_level"] = os.environ["COLOR_PICKER_LOG_LEVEL"].upper()
    if "COLOR_PICKER_MCP" in os.environ:
        values["mcp"] = _env_flag(os.environ["COLOR_PICKER_MCP"])
    return Settings(**values)
