"""Core types, parsing and request construction."""

from .diagnostics import parse_diagnostic, parse_diagnostics
from .formats import detect_format
from .request import build_request_params

__all__ = [
    "build_request_params",
    "detect_format",
    "parse_diagnostic",
    "parse_diagnostics",
]
