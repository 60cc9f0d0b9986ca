"""Runtime settings resolved from the environment and optional .env files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigurationError

ENV_PREFIX = "FRAMEGEN_"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class FramegenSettings(BaseModel):
    log_level: str = "WARNING"
    atomic_write: bool = True
    manifest_path: Optional[Path] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(
    env_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FramegenSettings:
    """Resolve ``FRAMEGEN_*`` settings.

    Process environment values win over values read from ``env_file``; a
    missing ``env_file`` is an error only when one was requested explicitly.
    """

    values: Dict[str, str] = {}
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.is_file():
            raise ConfigurationError(f"Env file not found: {env_path}", path=env_path)
        values.update(_strip_prefix(dotenv_values(env_path)))

    values.update(_strip_prefix(os.environ if environ is None else environ))

    try:
        return FramegenSettings.model_validate(values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{ENV_PREFIX}{'.'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from exc


def _strip_prefix(source: Mapping[str, Optional[str]]) -> Dict[str, str]:
    resolved: Dict[str, str] = {}
    for key, value in source.items():
        if not key.startswith(ENV_PREFIX) or value is None or value == "":
            continue
        resolved[key[len(ENV_PREFIX):].lower()] = value
    return resolved
