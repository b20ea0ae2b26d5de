"""Filename validation and classification by extension."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Optional

from aboutfile.filetype import ExecType, FileType, ImgType
from aboutfile.models import ClassifierConfig, Feature, FileReport
from aboutfile.tables import INVALID_CHARS, REPLACEMENT_CHAR

logger = logging.getLogger(__name__)


class FeatureDisabledError(RuntimeError):
    """A classification category was used without being enabled in the config."""

    def __init__(self, feature: Feature):
        super().__init__(f"feature '{feature.value}' is not enabled")
        self.feature = feature


def _extension_set(extensions: Iterable[str]) -> frozenset[str]:
    # A bare string is one extension, not a collection of substrings
    if isinstance(extensions, str):
        return frozenset((extensions,))
    return frozenset(extensions)


def _char_set(chars: Iterable[str]) -> tuple[str, ...]:
    chars = tuple(chars)
    bad = [c for c in chars if len(c) != 1]
    if bad:
        raise ValueError(f"invalid characters must be single characters: {bad!r}")
    return chars


class Classifier:
    """
    Pure predicates and extractors over a filename string.

    Holds only immutable configuration; every method is a function of its
    arguments and is safe to call from any thread.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config if config is not None else ClassifierConfig()
        self._invalid_chars: tuple[str, ...] = (
            self.config.invalid_chars
            if self.config.invalid_chars is not None
            else INVALID_CHARS
        )
        logger.debug(
            "classifier ready: features=%s invalid_chars=%d",
            ",".join(sorted(f.value for f in self.config.features)) or "none",
            len(self._invalid_chars),
        )

    def _require(self, feature: Feature) -> None:
        if not self.config.enabled(feature):
            raise FeatureDisabledError(feature)

    # -- Core predicates and extractors ----------------------------------------

    def has_invalid_chars(self, text: str, custom_chars: Optional[Iterable[str]] = None) -> bool:
        """
        custom_chars replaces the active set; it is never merged with it.
        Each entry must be a single character (ValueError otherwise).
        """
        invalid = self._invalid_chars if custom_chars is None else _char_set(custom_chars)
        return any(c in text for c in invalid)

    def has_replacement_char(self, text: str) -> bool:
        return REPLACEMENT_CHAR in text

    def has_some_extension(self, text: str) -> bool:
        """
        True if text has a dot and the span from the last dot to the end is
        free of invalid characters. Anything before the last dot is ignored.
        """
        dot_idx = text.rfind(".")
        if dot_idx < 0:
            return False
        return not self.has_invalid_chars(text[dot_idx:])

    def get_extension(self, text: str) -> Optional[str]:
        """Text after the last dot, whitespace-trimmed, original case; None if absent."""
        if not self.has_some_extension(text):
            return None
        return text[text.rfind(".") + 1:].strip()

    def get_name(self, text: str) -> str:
        if not self.has_some_extension(text):
            return text
        return text[:text.rfind(".")]

    def has_extension(self, text: str, extensions: Iterable[str]) -> bool:
        """
        extensions are expected lowercase, without the leading dot. A single
        string is taken as one extension.
        """
        ext = self.get_extension(text)
        if ext is None:
            return False
        return ext.lower() in _extension_set(extensions)

    def is_valid_filename(self, text: str) -> bool:
        no_invalid = not self.has_invalid_chars(text)
        no_leading_space = not text.startswith(" ")
        no_replacement = not self.has_replacement_char(text)
        return no_invalid and no_leading_space and no_replacement

    def is_valid_file_with_ext(self, text: str, extensions: Iterable[str]) -> bool:
        if not (self.is_valid_filename(text) and self.has_some_extension(text)):
            return False
        return self.get_extension(text).lower() in _extension_set(extensions)

    # -- Optional categories ---------------------------------------------------

    def is_executable(self, text: str) -> bool:
        """Exact-case lookup: "setup.EXE" is not an executable."""
        self._require(Feature.EXECUTABLE)
        ext = self.get_extension(text)
        if ext is None:
            return False
        return ext in self.config.executable_formats

    def is_valid_executable(self, text: str) -> bool:
        self._require(Feature.EXECUTABLE)
        return self.is_valid_filename(text) and self.is_executable(text)

    def is_image(self, text: str) -> bool:
        """
        True if the lowercased filename ends with any image format suffix.
        Matches on the tail of the whole name, so a dot is not required.
        """
        self._require(Feature.IMAGE)
        lowered = text.lower()
        return any(lowered.endswith(fmt) for fmt in self.config.image_formats)

    def is_valid_image(self, text: str) -> bool:
        self._require(Feature.IMAGE)
        return self.is_image(text) and self.is_valid_filename(text)

    def is_proprietary(self, text: str) -> bool:
        self._require(Feature.PROPRIETARY)
        return self.has_extension(text, self.config.proprietary_formats)

    def is_valid_proprietary(self, text: str) -> bool:
        self._require(Feature.PROPRIETARY)
        return self.is_proprietary(text) and self.is_valid_filename(text)

    def file_type(self, text: str) -> FileType:
        """
        Image first, then executable, else unknown. Categories not enabled in
        the config are skipped. Proprietary, document, archive and audio are
        never produced.
        """
        self._require(Feature.FILE_TYPE)
        ext = self.get_extension(text)
        if ext is None:
            return FileType.unknown()

        # The suffix match can fire on names like "scan.xpng"; only a parsed
        # extension from the table has a subtype.
        if (
            self.config.enabled(Feature.IMAGE)
            and self.is_image(text)
            and ext.lower() in self.config.image_formats
        ):
            return FileType.image(ImgType.from_ext(ext.lower()))
        if self.config.enabled(Feature.EXECUTABLE) and self.is_executable(text):
            return FileType.executable(ExecType.from_ext(ext))
        return FileType.unknown()

    def report(self, text: str, allowed: Optional[Iterable[str]] = None) -> FileReport:
        """Collect every answer for one filename into a FileReport."""
        report = FileReport(
            filename=text,
            name=self.get_name(text),
            extension=self.get_extension(text),
            valid=self.is_valid_filename(text),
        )
        if allowed is not None:
            report.allowed = self.is_valid_file_with_ext(text, allowed)
        if self.config.enabled(Feature.FILE_TYPE):
            ft = self.file_type(text)
            report.file_type = ft.kind.value
            report.subtype = str(ft.subtype) if ft.subtype is not None else None
        return report


# ---------------------------------------------------------------------------
# Module-level API backed by a default classifier (all features, built-in tables)
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def default_classifier() -> Classifier:
    return Classifier()


def has_invalid_chars(text: str, custom_chars: Optional[Iterable[str]] = None) -> bool:
    return default_classifier().has_invalid_chars(text, custom_chars)


def has_replacement_char(text: str) -> bool:
    return default_classifier().has_replacement_char(text)


def has_some_extension(text: str) -> bool:
    return default_classifier().has_some_extension(text)


def has_extension(text: str, extensions: Iterable[str]) -> bool:
    return default_classifier().has_extension(text, extensions)


def get_extension(text: str) -> Optional[str]:
    return default_classifier().get_extension(text)


def get_name(text: str) -> str:
    return default_classifier().get_name(text)


def is_valid_filename(text: str) -> bool:
    return default_classifier().is_valid_filename(text)


def is_valid_file_with_ext(text: str, extensions: Iterable[str]) -> bool:
    return default_classifier().is_valid_file_with_ext(text, extensions)


def is_executable(text: str) -> bool:
    return default_classifier().is_executable(text)


def is_valid_executable(text: str) -> bool:
    return default_classifier().is_valid_executable(text)


def is_image(text: str) -> bool:
    return default_classifier().is_image(text)


def is_valid_image(text: str) -> bool:
    return default_classifier().is_valid_image(text)


def is_proprietary(text: str) -> bool:
    return default_classifier().is_proprietary(text)


def is_valid_proprietary(text: str) -> bool:
    return default_classifier().is_valid_proprietary(text)


def file_type(text: str) -> FileType:
    return default_classifier().file_type(text)
