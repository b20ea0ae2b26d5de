from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from aboutfile.classify import Classifier
from aboutfile.config import get_classifier_config, tomllib

_PYPROJECT = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"


def build_classifier() -> Classifier:
    """Classifier from the effective config (file + env)."""
    return Classifier(get_classifier_config())


def split_extensions(raw: str | None) -> list[str] | None:
    """Parse a --allow value like "png,.JPG, gif" into lowercase extensions."""
    if raw is None:
        return None
    return [e.strip().lstrip(".").lower() for e in raw.split(",") if e.strip()]


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """Version from a source checkout's pyproject.toml, else the installed metadata."""
    try:
        with open(pyproject, "rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        project = {}
    if "version" in project:
        return project["version"]
    try:
        return version("aboutfile")
    except PackageNotFoundError:
        return "unknown"
