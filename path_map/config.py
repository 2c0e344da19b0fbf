"""
Configuration for the PathMap playground, read from the environment.
"""
from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "PATH_MAP_"


class PlaygroundConfig(BaseModel):
    """Settings used when launching the Gradio playground."""
    server_name: str = Field("127.0.0.1", description="Interface the server binds to")
    server_port: int = Field(7860, ge=1, le=65535, description="Port the server listens on")
    share: bool = Field(False, description="Whether to create a public Gradio share link")
    log_level: str = Field("INFO", description="Root log level for the playground process")
    preview_limit: int = Field(20, ge=1, description="Maximum entries shown in flattened previews")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, value) -> str:
        """Accept level names in any case and reject unknown ones."""
        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name


def load_config(environ=None) -> PlaygroundConfig:
    """Build a PlaygroundConfig from PATH_MAP_* environment variables."""
    environ = os.environ if environ is None else environ
    values = {}
    for name in PlaygroundConfig.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != '':
            values[name] = raw
    return PlaygroundConfig(**values)
