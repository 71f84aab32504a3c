from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "JSON_KEY_FILTER_"


class AppConfig(BaseModel):
    export_dir: Path = Field(default_factory=lambda: Path(tempfile.gettempdir()),
                             description="Directory filtered downloads are written to")
    default_file_name: str = Field("data.json", description="Name used when the upload has none")
    indent: int = Field(2, ge=0, description="Indentation of exported JSON")
    server_name: Optional[str] = Field(None, description="Host passed to Gradio launch()")
    server_port: Optional[int] = Field(None, description="Port passed to Gradio launch()")
    log_level: str = Field("INFO", description="Logging level")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> Dict[str, str]:
        """Collect matching environment variables and return them as a dict."""
        mapping = {}
        for field in cls.model_fields:
            env_key = prefix + field.upper()
            if env_key in os.environ:
                mapping[field] = os.environ[env_key]
        return mapping


_config_singleton: Optional[AppConfig] = None


def load_config(overrides: Optional[Dict[str, Any]] = None, env_prefix: str = ENV_PREFIX) -> AppConfig:
    """Layered config loader: defaults < overrides < environment variables.

    The first result is cached; pass ``overrides`` or call ``set_config`` to rebuild it.
    """
    global _config_singleton
    if _config_singleton is not None and not overrides:
        return _config_singleton

    merged = {**(overrides or {}), **AppConfig.from_env(env_prefix)}
    _config_singleton = AppConfig(**merged)
    return _config_singleton


def set_config(config: Optional[AppConfig]) -> None:
    global _config_singleton
    _config_singleton = config


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or load_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
