"""Construction of the form payload for the submission endpoint."""

from .enums import PaperSize
from .models import PlotParameters

API_VERSION = "1"


def build_request_params(spec: str, parameters: PlotParameters) -> list[tuple[str, str]]:
    """Build the ordered form fields for the submission request.

    ``message``, ``style``, ``format`` and ``apiVersion`` are always sent.
    ``apikey``, ``paper``, ``landscape`` and ``scale`` are sent only when set;
    a paper size of ``PaperSize.NONE`` is not sent.

    Args:
        spec: Diagram text
        parameters: Plot parameters

    Returns:
        Ordered list of (name, value) pairs
    """
    params = [
        ("message", spec),
        ("style", parameters.style.wire_value),
        ("format", parameters.format.wire_value),
        ("apiVersion", API_VERSION),
    ]
    if parameters.api_key is not None:
        params.append(("apikey", parameters.api_key))
    if parameters.paper_size not in (None, PaperSize.NONE):
        params.append(("paper", parameters.paper_size.wire_value))
    if parameters.paper_orientation is not None:
        params.append(("landscape", parameters.paper_orientation.wire_value))
    if parameters.scale is not None:
        params.append(("scale", str(parameters.scale)))
    return params
