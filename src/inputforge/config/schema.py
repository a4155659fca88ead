"""Typed configuration schema and loader for the inputforge package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Settings for the deterministic seed secret."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class RandomnessSettings(BaseModel):
    """Which randomness discipline generators use by default."""

    mode: Literal["seeded", "system"]
    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")


class CorpusSettings(BaseModel):
    """Bad-password corpus location and covered length band ``[min, max)``."""

    path: Path | None = None
    min_length: conint(ge=1) = 3
    max_length: conint(ge=2) = 40

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_band(self) -> CorpusSettings:
        if self.max_length <= self.min_length:
            raise ValueError("corpus.max_length must exceed corpus.min_length")
        return self


class WordSettings(BaseModel):
    """Default word list selection and optional full-size list files."""

    default: Literal["ag", "eff"]
    ag_path: Path | None = None
    eff_path: Path | None = None

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Package logger configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    randomness: RandomnessSettings
    corpus: CorpusSettings
    words: WordSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < environment
    variable for the seed secret.
    """

    with (
        importlib_resources.files("inputforge.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret_env = cfg.randomness.seed.secret_env
    if secret_env in environ:
        cfg.randomness.seed.secret = SecretStr(environ[secret_env])

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "RandomnessSettings",
    "CorpusSettings",
    "WordSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
