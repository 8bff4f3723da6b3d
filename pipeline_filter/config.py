import os
from functools import lru_cache
from typing import Optional

from dotenv import dotenv_values
from pydantic import BaseModel, Field

_ENV_KEYS = {
    "json_indent": "PIPELINE_FILTER_JSON_INDENT",
    "validate_output": "PIPELINE_FILTER_VALIDATE_OUTPUT",
}


class Settings(BaseModel):
    json_indent: int = Field(default=2, ge=0)  # used when indented=True
    validate_output: bool = False


@lru_cache(maxsize=4)
def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read the PIPELINE_FILTER_* settings once per process.

    Only the process environment is consulted unless `env_file` is given; the
    file's PIPELINE_FILTER_* keys then fill in whatever the environment leaves
    unset. Nothing is written back to os.environ.
    """
    file_values = dotenv_values(env_file) if env_file else {}
    raw = {}
    for name, env_key in _ENV_KEYS.items():
        value = os.getenv(env_key) or file_values.get(env_key)
        if value not in (None, ""):
            raw[name] = value
    return Settings(**raw)


__all__ = ["Settings", "get_settings"]
