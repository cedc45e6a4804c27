"""Command-line interface for parsing Google Docs and local documents.

Subcommands:

``parse``
    Download a public Google Doc and extract keyword values.
``extract``
    Extract keyword values from a local ``.docx`` or ``.html`` file.

Both print JSON shaped like the API response, or write it to a file.
"""

import argparse
import json
import sys
from pathlib import Path

from gdoc_parser.errors import DocParserError
from gdoc_parser.pipeline import GoogleDocProcessor, ParseResult
from gdoc_parser.utils.config import load_config
from gdoc_parser.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def _result_to_dict(result: ParseResult, include_html: bool = True) -> dict[str, object]:
    """Shape a parse result like the ``/parse-doc`` response body.

    Args:
        result: Pipeline output.
        include_html: Whether to include the converted HTML.

    Returns:
        JSON-serializable dictionary.
    """
    output: dict[str, object] = {}
    if include_html:
        output["rawHtml"] = result.raw_html
    output["structuredData"] = result.structured_data
    return output


def _emit(output: dict[str, object], output_path: Path | None) -> None:
    output_str = json.dumps(output, indent=2, ensure_ascii=False)
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output_str, encoding="utf-8")
        print(f"Output written to {output_path}")
    else:
        print(output_str)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-k",
        "--keyword",
        action="append",
        default=[],
        dest="keywords",
        help="Keyword to extract (repeatable)",
    )
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file")
    parser.add_argument(
        "--no-html", action="store_true", help="Omit the converted HTML from output"
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="Google Docs keyword extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a public Google Doc")
    parse_parser.add_argument("url", help="Google Docs document URL")
    _add_common_arguments(parse_parser)

    extract_parser = subparsers.add_parser(
        "extract", help="Parse a local .docx or .html file"
    )
    extract_parser.add_argument("file", type=Path, help="Document file to parse")
    _add_common_arguments(extract_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = load_config()
    setup_logging(config.log_level)
    processor = GoogleDocProcessor(config)

    if args.command == "extract" and not args.file.exists():
        print(f"Error: {args.file} does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "parse":
            result = processor.process(args.url, args.keywords)
        else:
            result = processor.process_file(args.file, args.keywords)
    except DocParserError as exc:
        logger.debug("Command %s failed: %r", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    _emit(_result_to_dict(result, include_html=not args.no_html), args.output)


if __name__ == "__main__":
    main()
