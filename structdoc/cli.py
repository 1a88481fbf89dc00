"""
structdoc Command Line

Commands:
  generate  - Generate Markdown documentation for Go structs
  init      - Write a default .structdoc.yaml into a source directory
  version   - Print the structdoc version
"""

import argparse
import sys
from typing import Optional

from structdoc import __version__
from structdoc.configs.logging import get_logger, setup_logging
from structdoc.configs.runtime import build_options, get_full_config
from structdoc.configs.yaml_config import create_default_config
from structdoc.exceptions import StructdocError
from structdoc.pipeline import generate_docs

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="structdoc",
        description="A documentation generator that creates Markdown documentation "
        "for Go structs, including field types, tags and comments.",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    # Also accepted after the command; SUPPRESS keeps the top-level values
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--debug", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging"
    )
    common.add_argument(
        "--log-file", default=argparse.SUPPRESS, help="Also write logs to this file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate", parents=[common], help="Generate documentation for Go structs"
    )
    generate.add_argument(
        "-p", "--path", required=True, help="Path to the Go package to generate documentation for"
    )
    generate.add_argument("-o", "--output", help="Output markdown file path (default: docs.md)")
    generate.add_argument(
        "-t", "--field-tag", help="Tag to use for field names (e.g., json)"
    )
    generate.add_argument("--title", help="Documentation title")
    generate.add_argument(
        "-e",
        "--show-exported",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show exported field information (default: on)",
    )
    generate.add_argument("--config", help="YAML config file (default: <path>/.structdoc.yaml)")

    init = subparsers.add_parser("init", parents=[common], help="Write a default .structdoc.yaml")
    init.add_argument("-p", "--path", default=".", help="Directory to write the config into")

    subparsers.add_parser("version", parents=[common], help="Print the structdoc version")

    return parser


def _run_generate(args: argparse.Namespace) -> int:
    config = get_full_config(
        args.path,
        config_path=args.config,
        overrides={
            "title": args.title,
            "field_tag": args.field_tag,
            "show_exported": args.show_exported,
            "output": args.output,
        },
    )
    options = build_options(config)

    result = generate_docs(args.path, config["output"], options, config["ignore"])
    print(f"Documentation generated successfully at: {result.output_path}")
    return 0


def _run_init(args: argparse.Namespace) -> int:
    path = create_default_config(args.path)
    print(f"Wrote {path}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.command == "version":
        print(f"structdoc {__version__}")
        return 0

    try:
        if args.command == "generate":
            return _run_generate(args)
        return _run_init(args)
    except StructdocError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
