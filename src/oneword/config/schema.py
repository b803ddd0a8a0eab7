"""Typed configuration schema and loader for the oneword package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ReaderSettings(BaseModel):
    """Pacing limits for playback."""

    default_wpm: confloat(gt=0)
    min_wpm: confloat(gt=0)
    max_wpm: confloat(gt=0)
    wpm_step: confloat(gt=0) = 10

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_range(self) -> "ReaderSettings":
        if not self.min_wpm <= self.default_wpm <= self.max_wpm:
            raise ValueError("reader.default_wpm must lie between min_wpm and max_wpm")
        return self


class LibrarySettings(BaseModel):
    """Location of the persisted book library."""

    path: str
    path_env: str

    model_config = ConfigDict(extra="forbid")

    @property
    def resolved_path(self) -> Path:
        return Path(self.path).expanduser()


class DualLanguageSettings(BaseModel):
    """Settings for the bilingual word pairing heuristic."""

    title_keywords: list[str]
    script_start: conint(ge=0, le=0x10FFFF)
    script_end: conint(ge=0, le=0x10FFFF)
    pad_token: str = ""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_script_range(self) -> "DualLanguageSettings":
        if self.script_start > self.script_end:
            raise ValueError("dual_language.script_start must not exceed script_end")
        return self


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    reader: ReaderSettings
    library: LibrarySettings
    dual_language: DualLanguageSettings

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

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``library.path_env`` for the library file.
    """

    with (
        importlib_resources.files("oneword.config")
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
    path_env = cfg.library.path_env
    if environ.get(path_env):
        cfg.library.path = environ[path_env]

    return cfg


__all__ = [
    "ConfigModel",
    "ReaderSettings",
    "LibrarySettings",
    "DualLanguageSettings",
    "deep_merge_dicts",
    "load_config",
]
