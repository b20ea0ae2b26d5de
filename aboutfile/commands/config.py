"""aboutfile config: show the effective classifier configuration."""
from __future__ import annotations

from aboutfile.config import config_path, get_classifier_config


def cmd_config(args) -> None:
    path = config_path()
    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    print(f"# config: {source}")
    print(get_classifier_config().model_dump_json(indent=2))
