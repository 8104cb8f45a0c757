"""Shared file I/O helpers."""

from .yaml_io import DuplicateKeyError, UniqueKeySafeLoader, load_yaml_file, load_yaml_text

__all__ = ["DuplicateKeyError", "UniqueKeySafeLoader", "load_yaml_file", "load_yaml_text"]
