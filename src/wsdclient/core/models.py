"""Pydantic models for wsdclient data structures."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import OutputFormat, PaperOrientation, PaperSize, Style


class PlotParameters(BaseModel):
    """Parameters for plotting a diagram."""

    model_config = ConfigDict(frozen=True)

    style: Style = Field(default=Style.DEFAULT, description="Visual theme")
    format: OutputFormat = Field(default=OutputFormat.PNG, description="Requested output format")
    paper_size: PaperSize | None = Field(default=None, description="Paper size, only useful with PDF output")
    paper_orientation: PaperOrientation | None = Field(
        default=None, description="Paper orientation, only useful with PDF output"
    )
    scale: int | None = Field(default=None, gt=0, description="Scale in percent. High-res PNG is 200")
    api_key: str | None = Field(default=None, description="API key for premium features", repr=False)


class DiagramError(BaseModel):
    """An error reported by the service for one line of the diagram.

    Example raw errors from the API:

        "Line 1: Syntax error."
        "Line 3: Deactivate: A was not activated."

    Errors are not fatal: a diagram may be returned together with errors.
    """

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=0, description="Line number as reported by the service")
    description: str = Field(..., description="Parsed description")
    raw_description: str = Field(..., description="Diagnostic string as returned by the service")


class ServiceEnvelope(BaseModel):
    """JSON body returned by the submission endpoint."""

    model_config = ConfigDict(extra="ignore")

    img: str = Field(..., description="Resource reference of the rendered diagram, e.g. '?png=mscKTO107'")
    errors: list[str] = Field(..., description="Raw per-line diagnostics")


class DiagramResult(BaseModel):
    """Outcome of a successful render."""

    diagram: bytes = Field(..., description="Rendered diagram content")
    errors: list[DiagramError] = Field(default_factory=list, description="Diagnostics in service order")
    actual_format: OutputFormat = Field(..., description="Format detected from the resource reference")
    requested_format: OutputFormat | None = Field(default=None, description="Format that was asked for")

    @property
    def has_errors(self) -> bool:
        """Whether the service reported any diagnostics."""
        return bool(self.errors)

    @property
    def format_mismatch(self) -> bool:
        """Whether the service returned a different format than requested."""
        return self.requested_format is not None and self.actual_format != self.requested_format


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")
    suggestion: str | None = Field(default=None, description="Suggested correction")
