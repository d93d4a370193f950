"""Stitch the normalized program and extension parts into one script."""

from __future__ import annotations

import logging

from flatscript.build.assembler import line_starts, split_lines
from flatscript.exit_codes import UnstitchedExtensionError

log = logging.getLogger(__name__)

SEAM = "\n\n}\n\n"
UNSTITCHED_SEPARATOR = "\r\n\r\n"


def find_seam(extension_part: str, closing_tail: str | None = None) -> int | None:
    """Index of the closing brace that ends the extension part, or None.

    *closing_tail* is the source text that structurally follows the last
    closing brace token (see :meth:`TextAssembler.closing_tail`).  The
    extension part has been re-indented and CRLF-joined since, so the tail
    is matched by its line count and by the text sharing the brace's line.
    A literal trailing ``}`` always counts.
    """
    if closing_tail:
        tail = split_lines(closing_tail)
        lines = split_lines(extension_part)
        index = len(lines) - len(tail)
        if index >= 0 and lines[index].endswith("}" + tail[0]):
            return line_starts(extension_part)[index] + len(lines[index]) - len(tail[0]) - 1
    if extension_part.endswith("}"):
        return len(extension_part) - 1
    return None


def compose(
    program_part: str,
    extension_part: str,
    closing_tail: str | None = None,
    unstitched: str = "drop",
) -> str:
    """Merge the two parts, reopening the wrapper scope at the seam.

    When the extension part closes with a brace, the result is
    ``program + "\\n\\n}\\n\\n" + extension`` with that brace removed.
    Otherwise the *unstitched* policy decides what happens to non-empty
    extension content.
    """
    seam = find_seam(extension_part, closing_tail)
    if seam is not None:
        log.debug("stitching extension part at offset %d", seam)
        return f"{program_part}{SEAM}{extension_part[:seam]}{extension_part[seam + 1:]}"

    if not extension_part.strip():
        return program_part

    if unstitched == "append":
        log.debug("extension part has no closing brace, appending unstitched")
        return f"{program_part}{UNSTITCHED_SEPARATOR}{extension_part}"
    if unstitched == "error":
        raise UnstitchedExtensionError(
            f"Extension content does not end with a closing brace ({len(extension_part)} chars)."
        )
    if unstitched != "drop":
        raise ValueError(f"Unknown unstitched policy: {unstitched!r}")
    log.warning(
        "extension content does not end with a closing brace; dropped %d chars",
        len(extension_part),
    )
    return program_part
