"""HTTP client for the websequencediagrams rendering service."""

from __future__ import annotations

from types import TracebackType

import httpx
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wsdclient.core.diagnostics import parse_diagnostics
from wsdclient.core.enums import RenderPhase
from wsdclient.core.errors import EnvelopeParseError, HttpStatusError, TransportError
from wsdclient.core.formats import detect_format
from wsdclient.core.models import DiagramResult, PlotParameters, ServiceEnvelope
from wsdclient.core.request import build_request_params
from wsdclient.infra.logging import get_logger, redact_secret

logger = get_logger(__name__)


class ServiceSettings(BaseSettings):
    """Settings for the rendering service connection."""

    model_config = SettingsConfigDict(
        env_prefix="WSDCLIENT_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = Field("http://www.websequencediagrams.com", description="Service host")
    endpoint: str = Field("/index.php", description="Path of the submission and download endpoint")
    timeout: float = Field(30.0, gt=0, description="Timeout in seconds for each HTTP call")

    @property
    def endpoint_url(self) -> str:
        """Absolute URL of the service endpoint."""
        return self.base_url.rstrip("/") + self.endpoint


class WSDClient:
    """Client that renders diagrams through the two-step service API.

    The first call submits the diagram and returns a JSON envelope with a
    resource reference and diagnostics; the second call downloads the
    rendered diagram. Calls are sequential and never retried.
    """

    def __init__(
        self,
        settings: ServiceSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Service settings, defaults to environment variables
            http_client: Optional pre-configured httpx client. When given, the
                caller keeps ownership and the client is not closed here.
        """
        self.settings = settings or ServiceSettings()
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=self.settings.timeout)

    def close(self) -> None:
        """Close the underlying HTTP client if it was created here."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> WSDClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def render_diagram(self, spec: str, parameters: PlotParameters) -> DiagramResult:
        """Render a diagram.

        A diagram may be returned even if the service reports errors for some
        lines; those are returned in ``DiagramResult.errors``.

        Args:
            spec: Diagram text
            parameters: Plot parameters

        Returns:
            Rendered diagram with diagnostics and the detected format

        Raises:
            TransportError: If either HTTP call fails at the transport level
            HttpStatusError: If either HTTP call returns a non-success status
            EnvelopeParseError: If the submission response is malformed
            FormatDetectionError: If the resource reference is unusable
            DiagnosticParseError: If any diagnostic cannot be parsed
        """
        envelope = self._submit(spec, parameters)
        diagram = self._fetch(envelope.img)

        actual_format = detect_format(envelope.img)
        if actual_format != parameters.format:
            logger.debug(
                "Service returned a different format than requested",
                requested_format=parameters.format.value,
                actual_format=actual_format.value,
                api_key=redact_secret(parameters.api_key),
            )

        errors = parse_diagnostics(envelope.errors)
        logger.debug(
            "Diagram rendered",
            actual_format=actual_format.value,
            size_bytes=len(diagram),
            error_count=len(errors),
        )

        return DiagramResult(
            diagram=diagram,
            errors=errors,
            actual_format=actual_format,
            requested_format=parameters.format,
        )

    def _submit(self, spec: str, parameters: PlotParameters) -> ServiceEnvelope:
        url = self.settings.endpoint_url
        logger.debug(
            "Submitting diagram",
            url=url,
            style=parameters.style.value,
            requested_format=parameters.format.value,
            spec_chars=len(spec),
            api_key=redact_secret(parameters.api_key),
        )

        try:
            response = self._http.post(url, data=dict(build_request_params(spec, parameters)))
        except httpx.HTTPError as e:
            raise TransportError(f"Error sending request to {url}: {e}", url=url, phase=RenderPhase.SUBMIT) from e

        # Keep the whole body so it can be reported if something goes wrong
        body = response.text
        if not response.is_success:
            raise HttpStatusError(response.status_code, url, body=body, phase=RenderPhase.SUBMIT)

        try:
            return ServiceEnvelope.model_validate_json(body)
        except ValidationError as e:
            raise EnvelopeParseError(str(e), body) from e

    def _fetch(self, resource: str) -> bytes:
        # The resource reference already starts with '?'
        url = self.settings.endpoint_url + resource
        logger.debug("Fetching diagram", url=url)

        try:
            response = self._http.get(url)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Error sending request for diagram to {url}: {e}", url=url, phase=RenderPhase.FETCH
            ) from e

        if not response.is_success:
            raise HttpStatusError(response.status_code, url, phase=RenderPhase.FETCH)
        return response.content


def get_diagram(
    spec: str,
    parameters: PlotParameters,
    settings: ServiceSettings | None = None,
) -> DiagramResult:
    """Render a diagram with a short-lived client.

    Args:
        spec: Diagram text
        parameters: Plot parameters
        settings: Service settings, defaults to environment variables

    Returns:
        Rendered diagram with diagnostics and the detected format
    """
    with WSDClient(settings) as client:
        return client.render_diagram(spec, parameters)
