"""Filename validation and extension-based file-type classification."""
from aboutfile.classify import (
    Classifier,
    FeatureDisabledError,
    default_classifier,
    file_type,
    get_extension,
    get_name,
    has_extension,
    has_invalid_chars,
    has_replacement_char,
    has_some_extension,
    is_executable,
    is_image,
    is_proprietary,
    is_valid_executable,
    is_valid_file_with_ext,
    is_valid_filename,
    is_valid_image,
    is_valid_proprietary,
)
from aboutfile.filetype import ArchType, DocType, ExecType, FileType, ImgType, Kind, PropType
from aboutfile.models import ClassifierConfig, Feature, FileReport

__all__ = [
    "ArchType",
    "Classifier",
    "ClassifierConfig",
    "DocType",
    "ExecType",
    "Feature",
    "FeatureDisabledError",
    "FileReport",
    "FileType",
    "ImgType",
    "Kind",
    "PropType",
    "default_classifier",
    "file_type",
    "get_extension",
    "get_name",
    "has_extension",
    "has_invalid_chars",
    "has_replacement_char",
    "has_some_extension",
    "is_executable",
    "is_image",
    "is_proprietary",
    "is_valid_executable",
    "is_valid_file_with_ext",
    "is_valid_filename",
    "is_valid_image",
    "is_valid_proprietary",
]
