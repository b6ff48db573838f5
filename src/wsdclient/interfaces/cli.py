"""Command-line entry point for wsdclient."""

import argparse
import logging
import sys
from pathlib import Path

from wsdclient import __version__
from wsdclient.core.enums import OutputFormat, PaperOrientation, PaperSize, Style
from wsdclient.core.errors import InputValidationError, WSDClientError
from wsdclient.core.models import DiagramError, DiagramResult
from wsdclient.infra.http_client import WSDClient
from wsdclient.infra.logging import configure_logging, get_logger
from wsdclient.interfaces.validators import API_KEY_ENV, OptionsValidator, RawOptions, resolve_api_key

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

STDIN_NAME = "<STDIN>"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wsdclient",
        description=(
            "wsdclient is a tool for creating diagrams from their textual representation "
            "using the websequencediagrams public API"
        ),
    )
    parser.add_argument("input_file", nargs="?", help="input file to use. If not specified STDIN is read.")
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        help="output file for diagram. By default out.<format> is used, e.g. out.png",
    )
    parser.add_argument(
        "--api-key",
        help=(
            f"websequencediagrams API key. Prefer the {API_KEY_ENV} environment variable; "
            "this option takes precedence over it."
        ),
    )
    parser.add_argument(
        "--format",
        help=f"format of the output file. Possible values: {OutputFormat.help_text()}. Default: png",
    )
    parser.add_argument(
        "--style",
        help=f"style to use. Possible values: {Style.help_text()}. Default: {Style.default().human_readable_value}",
    )
    parser.add_argument(
        "--paper-size",
        help=f"paper size, only useful for pdf output. Possible values: {PaperSize.help_text()}. "
        "Not sent unless given.",
    )
    parser.add_argument(
        "--paper-orientation",
        help=f"paper orientation, only useful for pdf output. Possible values: {PaperOrientation.help_text()}. "
        "Not sent unless given.",
    )
    parser.add_argument(
        "--scale",
        help="scale in percent. Default is 100, high-res is 200. Not sent unless given.",
    )
    parser.add_argument(
        "--errors-fatal",
        action="store_true",
        help="treat diagram errors and format downgrades as fatal; nothing is written",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"wsdclient {__version__}")
    return parser


def starts_with_blank_line(spec: str) -> bool:
    """Whether the first line of the diagram text is blank."""
    return spec.split("\n", 1)[0].strip() == ""


def report_diagram_errors(spec: str, errors: list[DiagramError], input_name: str) -> None:
    """Print diagnostics with the offending source lines to stderr.

    The service reports line numbers one too low when the text starts with a
    blank line, so those are shifted by one for display.
    """
    lines = spec.split("\n")
    delta = 1 if starts_with_blank_line(spec) else 0
    for error in errors:
        line_number = error.line_number + delta
        print(f"{input_name}:{line_number} : {error.description}", file=sys.stderr)
        if 1 <= line_number <= len(lines):
            print(f"{lines[line_number - 1]}\n", file=sys.stderr)


def read_spec(input_file: str | None) -> str:
    """Read diagram text from a file, or stdin when no file is given."""
    if input_file is None:
        data = sys.stdin.buffer.read()
    else:
        data = Path(input_file).read_bytes()
    return data.decode("utf-8", errors="replace")


def _print_error(error: WSDClientError) -> None:
    print(f"ERROR: {error.message}", file=sys.stderr)
    for detail in error.details:
        if detail.suggestion:
            print(f"  {detail.field}: {detail.suggestion}", file=sys.stderr)
    if error.hint:
        print(f"HINT: {error.hint}", file=sys.stderr)


def _check_result(result: DiagramResult, spec: str, input_name: str, errors_fatal: bool) -> bool:
    if result.format_mismatch:
        print(
            f"WARNING: Actual format `{result.actual_format.wire_value}` is different from requested format "
            f"`{result.requested_format.wire_value}`\n"
            "Maybe you did not provide a correct api key for premium features (like pdf or svg formats)",
            file=sys.stderr,
        )
        if errors_fatal:
            return False

    if result.has_errors:
        report_diagram_errors(spec, result.errors, input_name)
        if errors_fatal:
            print(f"ERROR: Number of errors in diagram: {len(result.errors)}. Exiting.", file=sys.stderr)
            return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool.

    Args:
        argv: Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.WARNING, stream=sys.stderr)

    raw_options = RawOptions(
        style=args.style,
        format=args.format,
        paper_size=args.paper_size,
        paper_orientation=args.paper_orientation,
        scale=args.scale,
        api_key=resolve_api_key(args.api_key),
    )
    try:
        parameters = OptionsValidator().validate(raw_options)
    except InputValidationError as e:
        _print_error(e)
        return EXIT_USAGE

    output_file = args.output_file or f"out.{parameters.format.wire_value}"
    input_name = args.input_file or STDIN_NAME

    try:
        spec = read_spec(args.input_file)
    except OSError as e:
        print(f"ERROR: cannot read input {input_name}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        with WSDClient() as client:
            result = client.render_diagram(spec, parameters)
    except WSDClientError as e:
        logger.debug("Render failed", error=e.to_dict())
        _print_error(e)
        return EXIT_FAILURE

    if not _check_result(result, spec, input_name, args.errors_fatal):
        return EXIT_FAILURE

    try:
        Path(output_file).write_bytes(result.diagram)
    except OSError as e:
        print(f"ERROR: cannot write to output file {output_file}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.debug("Diagram written", output_file=output_file, size_bytes=len(result.diagram))
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
