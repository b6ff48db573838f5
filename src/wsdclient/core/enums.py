"""Enumerations for wsdclient core types.

Rendering options (style, output format, paper size and orientation) are
closed sets whose members carry the wire value sent to the service. Parsing
and help text generation are shared free functions parameterized over the
member list so every option type accepts input the same way.
"""

from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

OptionT = TypeVar("OptionT", bound="WSDOption")


def normalise_option(text: str) -> str:
    """Normalise option text for comparison.

    Lowercases and strips ``-`` and ``_`` so that ``modern-blue``,
    ``Modern_Blue`` and ``MODERNBLUE`` compare equal.
    """
    return text.lower().replace("-", "").replace("_", "")


def parse_option(members: Iterable[OptionT], text: str) -> OptionT | None:
    """Find the member whose human-readable value matches ``text``.

    Args:
        members: Candidate option members
        text: User supplied option text

    Returns:
        Matching member, or None if nothing matches
    """
    wanted = normalise_option(text)
    for member in members:
        if normalise_option(member.human_readable_value) == wanted:
            return member
    return None


def option_help(members: Iterable["WSDOption"]) -> str:
    """Render a comma separated list of accepted values, flagging premium ones."""
    return ", ".join(
        f"{member.human_readable_value} (premium)" if member.is_premium else member.human_readable_value
        for member in members
    )


class WSDOption(str, Enum):
    """Base for rendering options understood by the service.

    The member value is the wire value sent in the request.
    """

    @property
    def wire_value(self) -> str:
        """Value used in requests to the service."""
        return self.value

    @property
    def human_readable_value(self) -> str:
        """Value accepted on input and shown in help text."""
        return self.value

    @property
    def is_premium(self) -> bool:
        """Whether the option needs a valid API key to take effect."""
        return False

    @classmethod
    def all(cls: type[OptionT]) -> list[OptionT]:
        """Return every member in declaration order."""
        return list(cls)

    @classmethod
    def parse(cls: type[OptionT], text: str) -> OptionT | None:
        """Parse user text, ignoring case, ``-`` and ``_``."""
        return parse_option(cls.all(), text)

    @classmethod
    def help_text(cls) -> str:
        """Comma separated list of accepted values."""
        return option_help(cls.all())

    @classmethod
    def default(cls: type[OptionT]) -> OptionT:
        """Variant used when the caller makes no explicit choice."""
        return cls.all()[0]


class OutputFormat(WSDOption):
    """Output image format. PDF and SVG are premium features.

    A high-res PNG is PNG requested with ``scale=200``. The service may
    return a different format than requested, e.g. PNG when a premium format
    is asked for without a valid API key.
    """

    PNG = "png"
    PDF = "pdf"
    SVG = "svg"

    @property
    def is_premium(self) -> bool:
        """PDF and SVG need a premium account."""
        return self is not OutputFormat.PNG


class Style(WSDOption):
    """Visual theme used to draw the diagram."""

    DEFAULT = "default"
    EARTH = "earth"
    MAGAZINE = "magazine"
    MODERN_BLUE = "modern-blue"
    MSCGEN = "mscgen"
    NAPKIN = "napkin"
    OMEGAPPLE = "omegapple"
    PATENT = "patent"
    QSD = "qsd"
    ROSE = "rose"
    ROUNDGREEN = "roundgreen"


class PaperSize(WSDOption):
    """Paper size of the output. Only meaningful for PDF output."""

    NONE = "none"
    LETTER = "letter"
    A4 = "a4"
    TABLOID = "11x17"
    A1 = "a1"
    A2 = "a2"
    A3 = "a3"
    LEGAL = "legal"


class PaperOrientation(WSDOption):
    """Paper orientation of the output. Only meaningful for PDF output.

    The service encodes orientation numerically as ``landscape=0|1``.
    """

    PORTRAIT = "0"
    LANDSCAPE = "1"

    @property
    def human_readable_value(self) -> str:
        """Orientation name rather than its numeric wire value."""
        return self.name.lower()


class ErrorCode(str, Enum):
    """Application error codes for structured error reporting."""

    E400_VALIDATION = "E400_VALIDATION"
    E422_FORMAT_DETECTION = "E422_FORMAT_DETECTION"
    E422_DIAGNOSTIC_PARSE = "E422_DIAGNOSTIC_PARSE"
    E502_UPSTREAM_STATUS = "E502_UPSTREAM_STATUS"
    E502_BAD_ENVELOPE = "E502_BAD_ENVELOPE"
    E503_TRANSPORT = "E503_TRANSPORT"


class RenderPhase(str, Enum):
    """Steps of a render operation, used for error reporting and logging."""

    INPUT_VALIDATION = "input_validation"
    SUBMIT = "submit"
    FETCH = "fetch"
    FORMAT_DETECTION = "format_detection"
    DIAGNOSTICS = "diagnostics"
