"""Language detection, grammar loading, and adapter registry."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import SyntaxAdapter

_EXTENSION_MAP: dict[str, str] = {
    ".cs": "c_sharp",
    ".csx": "c_sharp",
}

_SUPPORTED_LANGUAGES = frozenset({"c_sharp"})

# Accepted spellings for --language style inputs
_LANGUAGE_ALIASES = {
    "c#": "c_sharp",
    "cs": "c_sharp",
    "csharp": "c_sharp",
    "c_sharp": "c_sharp",
}


def normalize_language(language: str) -> str:
    """Resolve a user-facing language spelling to its grammar name."""
    return _LANGUAGE_ALIASES.get(language.lower(), language)


def get_language_for_file(path: str) -> str | None:
    """Determine the language for a file based on its extension.

    Returns the language name string, or None if unsupported.
    """
    _, ext = os.path.splitext(path)
    return _EXTENSION_MAP.get(ext.lower())


def get_parser(language: str):
    """Get a tree-sitter Parser from tree_sitter_language_pack.

    Raises:
        ValueError: If the language is not supported.
    """
    if language not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")

    from tree_sitter_language_pack import get_parser as _get_parser

    return _get_parser(language)


@lru_cache(maxsize=None)
def _create_adapter(language: str) -> "SyntaxAdapter":
    """Create and cache an adapter instance for a language."""
    if language == "c_sharp":
        from .csharp_lang import CSharpAdapter

        return CSharpAdapter()
    raise ValueError(f"Unsupported language: {language}")


def get_adapter(language: str) -> "SyntaxAdapter":
    """Get the syntax adapter for a language.

    Raises:
        ValueError: If the language is not supported.
    """
    if language not in _SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")
    return _create_adapter(language)


def get_supported_extensions() -> list[str]:
    """Return all supported file extensions."""
    return sorted(_EXTENSION_MAP.keys())


def get_supported_languages() -> list[str]:
    """Return all supported language names."""
    return sorted(_SUPPORTED_LANGUAGES)
