"""wsdclient - render sequence diagrams through the websequencediagrams API."""

from .core.enums import OutputFormat, PaperOrientation, PaperSize, Style
from .core.errors import WSDClientError
from .core.models import DiagramError, DiagramResult, PlotParameters
from .infra.http_client import ServiceSettings, WSDClient, get_diagram

__version__ = "0.1.0"

__all__ = [
    "DiagramError",
    "DiagramResult",
    "OutputFormat",
    "PaperOrientation",
    "PaperSize",
    "PlotParameters",
    "ServiceSettings",
    "Style",
    "WSDClient",
    "WSDClientError",
    "__version__",
    "get_diagram",
]
