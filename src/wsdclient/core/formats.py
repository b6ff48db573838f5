"""Detection of the output format actually produced by the service."""

import re

from .enums import OutputFormat
from .errors import ResourceParseError, UnknownFormatError

# "?png=mscKTO107" for png, "?pdf=mscKTO107" for pdf, "?svg=mscKTO107" for svg
_RESOURCE_PATTERN = re.compile(r"\?(?P<format>\w+)=.*", re.IGNORECASE | re.DOTALL)


def detect_format(resource: str) -> OutputFormat:
    """Determine the output format from a resource reference.

    The service silently falls back to PNG when a premium format is requested
    without a valid API key, so the requested format cannot be trusted.

    Args:
        resource: The ``img`` field of the service envelope

    Returns:
        The detected output format

    Raises:
        ResourceParseError: If ``resource`` is not of the form ``?<format>=<id>``
        UnknownFormatError: If ``<format>`` is not a known output format
    """
    match = _RESOURCE_PATTERN.search(resource)
    if match is None:
        raise ResourceParseError(resource)

    token = match.group("format")
    for output_format in OutputFormat.all():
        if output_format.wire_value == token.lower():
            return output_format
    raise UnknownFormatError(resource, token)
