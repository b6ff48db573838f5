"""Validation of user supplied rendering options."""

import os

from pydantic import BaseModel, Field

from wsdclient.core.enums import OptionT, OutputFormat, PaperOrientation, PaperSize, Style
from wsdclient.core.errors import InputValidationError
from wsdclient.core.models import ErrorDetail, PlotParameters

API_KEY_ENV = "WEBSEQUENCEDIAGRAM_API_KEY"


class RawOptions(BaseModel):
    """Option values as typed by the user, before validation."""

    style: str | None = Field(default=None, description="Style name")
    format: str | None = Field(default=None, description="Output format name")
    paper_size: str | None = Field(default=None, description="Paper size name")
    paper_orientation: str | None = Field(default=None, description="Paper orientation name")
    scale: str | None = Field(default=None, description="Scale in percent")
    api_key: str | None = Field(default=None, description="API key")


def resolve_api_key(explicit: str | None) -> str | None:
    """Return the explicit API key, falling back to the environment.

    Args:
        explicit: Key given on the command line, if any

    Returns:
        API key or None if neither source provides one
    """
    if explicit is not None:
        return explicit
    return os.environ.get(API_KEY_ENV)


class OptionsValidator:
    """Validator turning raw option text into PlotParameters.

    Every option is checked and all problems are reported together, so the
    user sees the complete list of invalid values at once.
    """

    def validate(self, options: RawOptions) -> PlotParameters:
        """Validate raw options.

        Args:
            options: Raw option values

        Returns:
            Validated plot parameters

        Raises:
            InputValidationError: If any option value is invalid
        """
        details: list[ErrorDetail] = []

        style = self._parse_choice(Style, "style", options.style, details)
        output_format = self._parse_choice(OutputFormat, "format", options.format, details)
        paper_size = self._parse_choice(PaperSize, "paper-size", options.paper_size, details)
        paper_orientation = self._parse_choice(
            PaperOrientation, "paper-orientation", options.paper_orientation, details
        )
        scale = self._parse_scale(options.scale, details)

        if details:
            raise InputValidationError(
                message="Invalid option values: " + "; ".join(d.reason or "" for d in details),
                details=details,
                hint="Run with --help to see the accepted values",
            )

        return PlotParameters(
            style=style if style is not None else Style.default(),
            format=output_format if output_format is not None else OutputFormat.default(),
            paper_size=paper_size,
            paper_orientation=paper_orientation,
            scale=scale,
            api_key=options.api_key,
        )

    def _parse_choice(
        self,
        option_type: type[OptionT],
        field: str,
        text: str | None,
        details: list[ErrorDetail],
    ) -> OptionT | None:
        if text is None:
            return None
        value = option_type.parse(text)
        if value is None:
            details.append(
                ErrorDetail(
                    field=field,
                    reason=f"incorrect {field} value. Got: {text}",
                    suggestion=f"Possible values are: {option_type.help_text()}",
                )
            )
        return value

    def _parse_scale(self, text: str | None, details: list[ErrorDetail]) -> int | None:
        if text is None:
            return None
        stripped = text.strip()
        if stripped.isascii() and stripped.isdigit() and int(stripped) > 0:
            return int(stripped)
        details.append(
            ErrorDetail(
                field="scale",
                reason=f"incorrect scale value. Got: {text}",
                suggestion="Scale should be a positive integer, e.g. 200 for high-res PNG",
            )
        )
        return None
