"""Unit tests for output format detection."""

import pytest

from wsdclient.core.enums import ErrorCode, OutputFormat
from wsdclient.core.errors import FormatDetectionError, ResourceParseError, UnknownFormatError
from wsdclient.core.formats import detect_format


class TestDetectFormat:
    """Test detect_format."""

    @pytest.mark.parametrize(
        ("resource", "expected"),
        [
            ("?png=mscABC123", OutputFormat.PNG),
            ("?pdf=mscXYZ", OutputFormat.PDF),
            ("?svg=mscXYZ", OutputFormat.SVG),
            ("?PNG=mscKTO107", OutputFormat.PNG),
        ],
    )
    def test_known_formats(self, resource: str, expected: OutputFormat) -> None:
        """Test known formats are detected."""
        assert detect_format(resource) is expected

    def test_unknown_format(self) -> None:
        """Test an unknown token fails with UnknownFormatError."""
        with pytest.raises(UnknownFormatError) as exc_info:
            detect_format("?xyz=mscXYZ")
        assert exc_info.value.token == "xyz"
        assert "png, pdf (premium), svg (premium)" in exc_info.value.message

    @pytest.mark.parametrize("resource", ["not-a-resource", "", "png=abc", "?=abc"])
    def test_malformed_resource(self, resource: str) -> None:
        """Test malformed resources fail with ResourceParseError."""
        with pytest.raises(ResourceParseError) as exc_info:
            detect_format(resource)
        assert exc_info.value.resource == resource

    def test_errors_share_base(self) -> None:
        """Test both failures are format detection errors."""
        for error_type in (ResourceParseError, UnknownFormatError):
            assert issubclass(error_type, FormatDetectionError)
        with pytest.raises(FormatDetectionError) as exc_info:
            detect_format("nope")
        assert exc_info.value.code == ErrorCode.E422_FORMAT_DETECTION
