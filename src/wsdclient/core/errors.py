"""Error handling and exception definitions for wsdclient."""

from typing import Any

from .enums import ErrorCode, OutputFormat, RenderPhase
from .models import ErrorDetail

# Raw bodies can be whole HTML error pages; keep messages readable.
_BODY_PREVIEW_CHARS = 400


def _preview(body: str) -> str:
    if len(body) <= _BODY_PREVIEW_CHARS:
        return body
    return body[:_BODY_PREVIEW_CHARS] + "..."


class WSDClientError(Exception):
    """Base exception for all wsdclient errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
        phase: RenderPhase | None = None,
    ):
        """Initialize wsdclient error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the user
            phase: Optional render phase where error occurred
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint
        self.phase = phase

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a JSON-serialisable dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": [d.model_dump() for d in self.details] if self.details else None,
            "hint": self.hint,
            "phase": self.phase.value if self.phase else None,
        }


class TransportError(WSDClientError):
    """Raised when the service cannot be reached or the connection fails."""

    def __init__(self, message: str, url: str, phase: RenderPhase | None = None):
        """Initialize transport error."""
        super().__init__(
            message=message,
            code=ErrorCode.E503_TRANSPORT,
            details=[ErrorDetail(field="url", reason=url)],
            hint="Check your network connection and that the service is reachable, then retry.",
            phase=phase,
        )
        self.url = url


class HttpStatusError(WSDClientError):
    """Raised when the service answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        url: str,
        body: str | None = None,
        phase: RenderPhase | None = None,
    ):
        """Initialize HTTP status error."""
        message = f"Error response from {url}: HTTP {status_code}"
        if body:
            message += f" response={_preview(body)}"

        details = [
            ErrorDetail(field="status_code", reason=str(status_code)),
            ErrorDetail(field="url", reason=url),
        ]
        super().__init__(
            message=message,
            code=ErrorCode.E502_UPSTREAM_STATUS,
            details=details,
            hint="The rendering service rejected the request or is unavailable.",
            phase=phase,
        )
        self.status_code = status_code
        self.url = url
        self.body = body


class EnvelopeParseError(WSDClientError):
    """Raised when the submission response is not the expected JSON envelope."""

    def __init__(self, reason: str, body: str):
        """Initialize envelope parse error."""
        super().__init__(
            message=f"Cannot deserialize service response: {reason} Response: {_preview(body)}",
            code=ErrorCode.E502_BAD_ENVELOPE,
            details=[ErrorDetail(field="body", reason=reason)],
            phase=RenderPhase.SUBMIT,
        )
        self.reason = reason
        self.body = body


class FormatDetectionError(WSDClientError):
    """Raised when the output format cannot be determined from the resource reference."""

    def __init__(self, message: str, resource: str, hint: str | None = None):
        """Initialize format detection error."""
        super().__init__(
            message=message,
            code=ErrorCode.E422_FORMAT_DETECTION,
            details=[ErrorDetail(field="img", reason=resource)],
            hint=hint,
            phase=RenderPhase.FORMAT_DETECTION,
        )
        self.resource = resource


class ResourceParseError(FormatDetectionError):
    """Raised when the resource reference does not look like '?<format>=<id>'."""

    def __init__(self, resource: str):
        """Initialize resource parse error."""
        super().__init__(
            message=f"Error parsing diagram url: {resource!r}",
            resource=resource,
            hint="Expected a resource reference like '?png=mscKTO107'",
        )


class UnknownFormatError(FormatDetectionError):
    """Raised when the resource reference names a format that is not known."""

    def __init__(self, resource: str, token: str):
        """Initialize unknown format error."""
        known = OutputFormat.help_text()
        super().__init__(
            message=f"Unknown format in diagram url. Known formats are: {known}. Got: {token}",
            resource=resource,
            hint=f"Known formats: {known}",
        )
        self.token = token


class DiagnosticParseError(WSDClientError):
    """Raised when a diagnostic line from the service cannot be parsed."""

    def __init__(self, raw: str, reason: str = "Expected 'Line <N>: <description>'"):
        """Initialize diagnostic parse error."""
        super().__init__(
            message=f"Error parsing error response {raw!r}: {reason}",
            code=ErrorCode.E422_DIAGNOSTIC_PARSE,
            details=[ErrorDetail(field="errors", reason=reason)],
            phase=RenderPhase.DIAGNOSTICS,
        )
        self.raw = raw
        self.reason = reason


class InvalidLineNumberError(DiagnosticParseError):
    """Raised when the line number of a diagnostic is not a valid integer."""

    def __init__(self, raw: str, line_number: str):
        """Initialize invalid line number error."""
        super().__init__(raw=raw, reason=f"Cannot convert line number into int: {line_number!r}")
        self.line_number = line_number


class InputValidationError(WSDClientError):
    """Raised when user supplied options are invalid."""

    def __init__(
        self,
        message: str,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
    ):
        """Initialize input validation error."""
        super().__init__(
            message=message,
            code=ErrorCode.E400_VALIDATION,
            details=details,
            hint=hint,
            phase=RenderPhase.INPUT_VALIDATION,
        )
