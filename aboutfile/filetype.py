"""FileType: a format family plus the specific subtype within it."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator


class Kind(Enum):
    UNKNOWN = "unknown"
    IMAGE = "image"
    EXECUTABLE = "executable"
    PROPRIETARY = "proprietary"
    DOCUMENT = "document"
    ARCHIVE = "archive"
    AUDIO = "audio"


def _resolve(table: dict, ext: str, family: str):
    try:
        return table[ext]
    except KeyError:
        # Callers confirm table membership first; reaching this means the
        # format table and the subtype mapping have drifted apart.
        raise AssertionError(f"no {family} subtype for extension {ext!r}") from None


class ImgType(Enum):
    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    BMP = "BMP"
    SVG = "SVG"
    RAW = "RAW"
    WEBP = "WEBP"
    TIFF = "TIFF"
    PSD = "PSD"
    HEIF = "HEIF"
    JPEG2000 = "JPEG2000"
    EPS = "EPS"

    @classmethod
    def from_ext(cls, ext: str) -> "ImgType":
        return _resolve(_IMG_BY_EXT, ext, "image")

    def __str__(self) -> str:
        return self.value


class ExecType(Enum):
    EXE = "EXE - Windows Executable"
    ACTION = "ACTION - MacOs Automator Action"
    BAT = "BAT - Windows Batch File"

    @classmethod
    def from_ext(cls, ext: str) -> "ExecType":
        return _resolve(_EXEC_BY_EXT, ext, "executable")

    def __str__(self) -> str:
        return self.value


class PropType(Enum):
    PSD = "PSD"
    AI = "AI"
    INDD = "INDD"  # .ind, .indd, .indt

    @classmethod
    def from_ext(cls, ext: str) -> "PropType":
        return _resolve(_PROP_BY_EXT, ext, "proprietary")

    def __str__(self) -> str:
        return self.value


# No document or archive formats are defined yet.
class DocType(Enum):
    pass


class ArchType(Enum):
    pass


_IMG_BY_EXT: dict[str, ImgType] = {
    **dict.fromkeys(("jpg", "jpeg", "jpe", "jfif", "jif"), ImgType.JPEG),
    "png": ImgType.PNG,
    "gif": ImgType.GIF,
    "bmp": ImgType.BMP,
    **dict.fromkeys(("svg", "svgz"), ImgType.SVG),
    **dict.fromkeys(("raw", "arw", "cr2", "nrw", "k25"), ImgType.RAW),
    "webp": ImgType.WEBP,
    **dict.fromkeys(("tiff", "tif"), ImgType.TIFF),
    "psd": ImgType.PSD,
    **dict.fromkeys(("heif", "helc"), ImgType.HEIF),
    **dict.fromkeys(("jp2", "j2k", "jpf", "jpx", "jpm", "mj2"), ImgType.JPEG2000),
    "eps": ImgType.EPS,
}

_EXEC_BY_EXT: dict[str, ExecType] = {
    "exe": ExecType.EXE,
    "action": ExecType.ACTION,
    "bat": ExecType.BAT,
}

_PROP_BY_EXT: dict[str, PropType] = {
    "psd": PropType.PSD,
    **dict.fromkeys(("ind", "indd", "indt"), PropType.INDD),
    "ai": PropType.AI,
}

# Extensions each subtype resolver understands; config tables must stay within these.
KNOWN_EXTENSIONS: dict[Kind, frozenset[str]] = {
    Kind.IMAGE: frozenset(_IMG_BY_EXT),
    Kind.EXECUTABLE: frozenset(_EXEC_BY_EXT),
    Kind.PROPRIETARY: frozenset(_PROP_BY_EXT),
}

_SUBTYPE_FOR_KIND: dict[Kind, Optional[type]] = {
    Kind.UNKNOWN: None,
    Kind.IMAGE: ImgType,
    Kind.EXECUTABLE: ExecType,
    Kind.PROPRIETARY: PropType,
    Kind.DOCUMENT: DocType,
    Kind.ARCHIVE: ArchType,
    Kind.AUDIO: None,
}


class FileType(BaseModel):
    """
    Tagged classification result.

    kind selects the variant; subtype carries the format family within it
    (None for UNKNOWN and AUDIO). Instances are immutable and hashable.
    """
    model_config = ConfigDict(frozen=True)

    kind: Kind
    subtype: Optional[Union[ImgType, ExecType, PropType]] = None

    @model_validator(mode="after")
    def _subtype_matches_kind(self) -> "FileType":
        expected = _SUBTYPE_FOR_KIND[self.kind]
        if expected is None:
            if self.subtype is not None:
                raise ValueError(f"{self.kind.value} takes no subtype")
        elif not isinstance(self.subtype, expected):
            raise ValueError(
                f"{self.kind.value} requires a {expected.__name__}, got {self.subtype!r}"
            )
        return self

    @classmethod
    def unknown(cls) -> "FileType":
        return cls(kind=Kind.UNKNOWN)

    @classmethod
    def image(cls, subtype: ImgType) -> "FileType":
        return cls(kind=Kind.IMAGE, subtype=subtype)

    @classmethod
    def executable(cls, subtype: ExecType) -> "FileType":
        return cls(kind=Kind.EXECUTABLE, subtype=subtype)

    @classmethod
    def proprietary(cls, subtype: PropType) -> "FileType":
        return cls(kind=Kind.PROPRIETARY, subtype=subtype)

    @classmethod
    def audio(cls) -> "FileType":
        return cls(kind=Kind.AUDIO)

    @property
    def is_unknown(self) -> bool:
        return self.kind is Kind.UNKNOWN

    def __str__(self) -> str:
        if self.subtype is None:
            return self.kind.value
        return f"{self.kind.value}/{self.subtype.name}"
