"""Pydantic models for classifier configuration and per-file reports."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from aboutfile.filetype import KNOWN_EXTENSIONS, Kind
from aboutfile.tables import EXECUTABLE_FORMATS, IMAGE_FORMATS, PROPRIETARY_FORMATS


class Feature(str, Enum):
    IMAGE = "image"
    EXECUTABLE = "executable"
    PROPRIETARY = "proprietary"
    FILE_TYPE = "file-type"


ALL_FEATURES: frozenset[Feature] = frozenset(Feature)


def _normalize_table(values: tuple[str, ...], kind: Kind) -> tuple[str, ...]:
    table = tuple(v.strip().lstrip(".").lower() for v in values)
    unknown = sorted(set(table) - KNOWN_EXTENSIONS[kind])
    if unknown:
        raise ValueError(
            f"no {kind.value} subtype for: {', '.join(unknown)}"
        )
    return table


# ---------------------------------------------------------------------------
# Classifier configuration
# ---------------------------------------------------------------------------

class ClassifierConfig(BaseModel):
    """
    Which classification tables are active, and what they contain.

    invalid_chars replaces the built-in set entirely when given.
    Format tables may only hold extensions their subtype resolver knows.
    """
    model_config = ConfigDict(frozen=True)

    features: frozenset[Feature] = ALL_FEATURES
    invalid_chars: Optional[tuple[str, ...]] = None
    image_formats: tuple[str, ...] = IMAGE_FORMATS
    executable_formats: tuple[str, ...] = EXECUTABLE_FORMATS
    proprietary_formats: tuple[str, ...] = PROPRIETARY_FORMATS

    @field_validator("invalid_chars")
    @classmethod
    def _single_chars(cls, v: Optional[tuple[str, ...]]) -> Optional[tuple[str, ...]]:
        if v is None:
            return v
        bad = [c for c in v if len(c) != 1]
        if bad:
            raise ValueError(f"invalid_chars entries must be single characters: {bad!r}")
        return v

    @field_validator("image_formats")
    @classmethod
    def _image_table(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _normalize_table(v, Kind.IMAGE)

    @field_validator("executable_formats")
    @classmethod
    def _executable_table(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _normalize_table(v, Kind.EXECUTABLE)

    @field_validator("proprietary_formats")
    @classmethod
    def _proprietary_table(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return _normalize_table(v, Kind.PROPRIETARY)

    def enabled(self, feature: Feature) -> bool:
        return feature in self.features


# ---------------------------------------------------------------------------
# Report models
# ---------------------------------------------------------------------------

class FileReport(BaseModel):
    filename: str
    name: str
    extension: Optional[str] = None
    valid: bool
    allowed: Optional[bool] = None
    file_type: Optional[str] = None
    subtype: Optional[str] = None
