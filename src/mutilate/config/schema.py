"""Typed configuration schema and loader for the mutilate package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint, constr

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class WordlistSettings(BaseModel):
    """Source and sampling rules for replacement words."""

    path: Path | None = None
    encoding: str = "utf-8"
    min_bucket_size: conint(ge=1) = 16
    max_syllable_length: conint(ge=1, le=255) = 255

    model_config = ConfigDict(extra="forbid")


class SeedSettings(BaseModel):
    """Settings for the pseudo-random generator seed."""

    value: int | None = None
    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class VerificationSettings(BaseModel):
    """Verification behaviour after mutilation."""

    strict: bool

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    language: constr(pattern=r"^[A-Za-z]{2}$")
    aggressive: bool
    wordlist: WordlistSettings
    seed: SeedSettings
    verification: VerificationSettings

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
        importlib_resources.files("mutilate.config")
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
    secret_env = cfg.seed.secret_env
    if environ.get(secret_env):
        cfg.seed.secret = SecretStr(environ[secret_env])

    return cfg


__all__ = [
    "ConfigModel",
    "WordlistSettings",
    "SeedSettings",
    "VerificationSettings",
    "deep_merge_dicts",
    "load_config",
]
