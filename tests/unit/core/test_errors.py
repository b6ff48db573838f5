"""Unit tests for error handling."""

from wsdclient.core.enums import ErrorCode, RenderPhase
from wsdclient.core.errors import (
    EnvelopeParseError,
    HttpStatusError,
    InputValidationError,
    TransportError,
    WSDClientError,
)
from wsdclient.core.models import ErrorDetail


class TestWSDClientError:
    """Test base WSDClientError class."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = WSDClientError(message="Test error", code=ErrorCode.E503_TRANSPORT)
        assert str(error) == "Test error"
        assert error.details == []
        assert error.hint is None
        assert error.phase is None

    def test_to_dict(self) -> None:
        """Test conversion to a dictionary."""
        error = WSDClientError(
            message="Test error",
            code=ErrorCode.E400_VALIDATION,
            details=[ErrorDetail(field="style", reason="bad")],
            hint="Fix your input",
            phase=RenderPhase.INPUT_VALIDATION,
        )
        assert error.to_dict() == {
            "code": "E400_VALIDATION",
            "message": "Test error",
            "details": [{"field": "style", "reason": "bad", "suggestion": None}],
            "hint": "Fix your input",
            "phase": "input_validation",
        }


class TestSpecificErrors:
    """Test specific error classes."""

    def test_http_status_error(self) -> None:
        """Test status, url and body are kept."""
        error = HttpStatusError(500, "http://host/index.php", body="boom", phase=RenderPhase.SUBMIT)
        assert error.code == ErrorCode.E502_UPSTREAM_STATUS
        assert error.status_code == 500
        assert error.body == "boom"
        assert "500" in error.message
        assert "boom" in error.message

    def test_http_status_error_truncates_long_body(self) -> None:
        """Test long bodies are shortened in the message but kept in full."""
        body = "x" * 5000
        error = HttpStatusError(502, "http://host", body=body)
        assert len(error.message) < 1000
        assert error.body == body

    def test_envelope_parse_error(self) -> None:
        """Test envelope errors carry the raw body."""
        error = EnvelopeParseError("invalid json", "<html>")
        assert error.code == ErrorCode.E502_BAD_ENVELOPE
        assert error.body == "<html>"
        assert error.phase == RenderPhase.SUBMIT

    def test_transport_error(self) -> None:
        """Test transport errors have a retry hint."""
        error = TransportError("connection refused", url="http://host", phase=RenderPhase.FETCH)
        assert error.code == ErrorCode.E503_TRANSPORT
        assert error.url == "http://host"
        assert error.hint is not None

    def test_input_validation_error(self) -> None:
        """Test input validation errors."""
        error = InputValidationError("bad options")
        assert error.code == ErrorCode.E400_VALIDATION
        assert error.phase == RenderPhase.INPUT_VALIDATION
