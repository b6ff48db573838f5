"""Parsing of per-line diagnostics reported by the rendering service."""

import re

from .errors import DiagnosticParseError, InvalidLineNumberError
from .models import DiagramError

_DIAGNOSTIC_PATTERN = re.compile(
    r"""
    \s*Line\s+
    (?P<line_number>\S+?)   # the line number
    \s*:\s*
    (?P<description>.*)     # the description
    """,
    re.IGNORECASE | re.VERBOSE | re.DOTALL,
)

# Line numbers are 32-bit signed on the service side.
MAX_LINE_NUMBER = 2**31 - 1
_MAX_LINE_NUMBER_DIGITS = len(str(MAX_LINE_NUMBER))


def parse_diagnostic(raw: str) -> DiagramError:
    """Parse one raw diagnostic such as ``"Line 1: Syntax error."``.

    The line number is returned as reported. The service reports numbers one
    too low when the diagram starts with a blank line; correcting that is left
    to whoever displays the errors.

    Args:
        raw: Diagnostic string as returned by the service

    Returns:
        Parsed DiagramError keeping ``raw`` verbatim

    Raises:
        DiagnosticParseError: If the string is not of the form ``Line <N>: <description>``
        InvalidLineNumberError: If ``<N>`` is not a non-negative integer
    """
    match = _DIAGNOSTIC_PATTERN.match(raw)
    if match is None:
        raise DiagnosticParseError(raw)

    line_number = match.group("line_number")
    if not (line_number.isascii() and line_number.isdigit()) or len(line_number) > _MAX_LINE_NUMBER_DIGITS:
        raise InvalidLineNumberError(raw, line_number)
    number = int(line_number)
    if number > MAX_LINE_NUMBER:
        raise InvalidLineNumberError(raw, line_number)

    return DiagramError(
        line_number=number,
        description=match.group("description"),
        raw_description=raw,
    )


def parse_diagnostics(raw_errors: list[str]) -> list[DiagramError]:
    """Parse every diagnostic in order, failing on the first malformed one."""
    return [parse_diagnostic(raw) for raw in raw_errors]
