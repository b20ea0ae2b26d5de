"""Load ~/.aboutfile.toml (TOML) with env-var overrides."""
from __future__ import annotations
import logging
import os
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Python < 3.11 backport
from pathlib import Path
from typing import Any

from aboutfile.models import ClassifierConfig, Feature

logger = logging.getLogger(__name__)

_DEFAULT: dict[str, Any] = {
    "classifier": {
        "features": [f.value for f in Feature],
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def config_path() -> Path:
    # ABOUTFILE_CONFIG_PATH wins over ~/.aboutfile.toml
    if "ABOUTFILE_CONFIG_PATH" in os.environ:
        return Path(os.environ["ABOUTFILE_CONFIG_PATH"])
    return Path.home() / ".aboutfile.toml"


def _split_features(raw: str) -> list[str]:
    raw = raw.strip()
    if raw.lower() == "none":
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def load_config() -> dict[str, Any]:
    cfg = dict(_DEFAULT)
    for section in cfg:
        cfg[section] = dict(cfg[section])

    path = config_path()
    if path.exists():
        with open(path, "rb") as f:
            user_cfg = tomllib.load(f)
        cfg = _deep_merge(cfg, user_cfg)
        logger.debug("loaded config from %s", path)

    # Env var overrides
    if (features := os.environ.get("ABOUTFILE_FEATURES")) is not None:
        cfg["classifier"]["features"] = _split_features(features)
    if chars := os.environ.get("ABOUTFILE_INVALID_CHARS"):
        cfg["classifier"]["invalid_chars"] = chars

    return cfg


# Module-level singleton, loaded once per process
_config: dict[str, Any] | None = None


def get_config() -> dict[str, Any]:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_classifier_config() -> ClassifierConfig:
    """Validate the [classifier] section; raises pydantic.ValidationError on bad values."""
    section = dict(get_config()["classifier"])
    # TOML and the env var give the override as one string of characters
    if isinstance(section.get("invalid_chars"), str):
        section["invalid_chars"] = tuple(section["invalid_chars"])
    return ClassifierConfig.model_validate(section)
