"""Shared input handling for commands: config resolution and document loading."""

from __future__ import annotations

from flatscript.build.documents import SourceDocument
from flatscript.config import FlattenConfig, resolve_config
from flatscript.exit_codes import ConfigError, UnsupportedInputError
from flatscript.languages.registry import (
    get_supported_extensions,
    get_supported_languages,
    normalize_language,
)


def load_config(**overrides) -> FlattenConfig:
    """Resolve the effective config, translating problems to ConfigError."""
    try:
        return resolve_config(".", **overrides)
    except (ValueError, TypeError, FileNotFoundError) as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_document(paths, language: str | None = None) -> SourceDocument:
    """Read *paths* as one document, translating problems to UnsupportedInputError."""
    if language is not None:
        language = normalize_language(language)
        if language not in get_supported_languages():
            raise UnsupportedInputError(
                f"Unsupported language: {language} (supported: {', '.join(get_supported_languages())})"
            )
    try:
        return SourceDocument.from_paths(list(paths), language=language)
    except FileNotFoundError as exc:
        raise UnsupportedInputError(f"File not found: {exc.filename}") from exc
    except OSError as exc:
        raise UnsupportedInputError(f"Cannot read {exc.filename}: {exc.strerror}") from exc
    except ValueError as exc:
        raise UnsupportedInputError(
            f"{exc} (supported extensions: {', '.join(get_supported_extensions())})"
        ) from exc
