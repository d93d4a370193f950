"""Standardized CLI exit codes for flatscript.

Exit code scheme:

    0  SUCCESS            -- script generated
    1  GENERAL_ERROR      -- unexpected failure, crash, unhandled exception
    2  USAGE_ERROR        -- invalid arguments, bad flags, unknown command (Click default)
    3  CONFIG_INVALID     -- .flatscript.json is malformed or has bad values
    4  UNSUPPORTED_INPUT  -- input file missing or of an unsupported language
    5  GATE_FAILURE       -- output rejected (empty script, unstitched extension content)

Build pipelines can tell "the script is degenerate" (5) apart from
"the tool crashed" (1).
"""

from __future__ import annotations

import click

# ---------------------------------------------------------------------------
# Exit code constants
# ---------------------------------------------------------------------------

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1
EXIT_USAGE: int = 2
EXIT_CONFIG_INVALID: int = 3
EXIT_UNSUPPORTED_INPUT: int = 4
EXIT_GATE_FAILURE: int = 5

DESCRIPTIONS: dict[int, str] = {
    EXIT_SUCCESS: "success",
    EXIT_ERROR: "unexpected error",
    EXIT_USAGE: "invalid usage (bad arguments or flags)",
    EXIT_CONFIG_INVALID: "invalid configuration -- check .flatscript.json",
    EXIT_UNSUPPORTED_INPUT: "input missing or language not supported",
    EXIT_GATE_FAILURE: "generated script rejected",
}

# ---------------------------------------------------------------------------
# Custom exceptions (caught by CLI error handler)
# ---------------------------------------------------------------------------


class FlatscriptError(click.ClickException):
    """Base class for flatscript errors with exit codes."""

    def __init__(self, message: str, exit_code: int = EXIT_ERROR):
        super().__init__(message)
        self.exit_code = exit_code

    def format_message(self) -> str:
        return self.message


class ConfigError(FlatscriptError):
    """Raised when the project configuration cannot be used."""

    def __init__(self, message: str = DESCRIPTIONS[EXIT_CONFIG_INVALID]):
        super().__init__(message, EXIT_CONFIG_INVALID)


class UnsupportedInputError(FlatscriptError):
    """Raised when an input file is missing or not a supported language."""

    def __init__(self, message: str = DESCRIPTIONS[EXIT_UNSUPPORTED_INPUT]):
        super().__init__(message, EXIT_UNSUPPORTED_INPUT)


class GateFailureError(FlatscriptError):
    """Raised when a generated script fails an output check."""

    def __init__(self, message: str = DESCRIPTIONS[EXIT_GATE_FAILURE]):
        super().__init__(message, EXIT_GATE_FAILURE)


class UnstitchedExtensionError(GateFailureError):
    """Extension content has no closing brace to stitch at (``error`` policy)."""
