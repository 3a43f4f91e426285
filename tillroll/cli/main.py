#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Normalize command handlers that call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt OCR text parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse [file] [--json] [--locale]
                             Parse OCR text from a file (or stdin with "-")
  serve [--host] [--port]    Start the receipt text parsing server
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse OCR receipt text")
    parse_parser.add_argument("file", nargs="?", default="-", help='Text file to parse (default: "-" for stdin)')
    parse_parser.add_argument("--json", action="store_true", help="Print the JSON payload instead of a summary")
    parse_parser.add_argument(
        "--locale", default=None, help="Client locale (e.g. tr-TR, fi-FI) used to fill a missing currency"
    )

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start receipt text parsing server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port to bind to (default: 8080)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "parse":
        from tillroll.cli.receipt import cmd_parse

        return _run_command(cmd_parse, args)
    elif args.command == "serve":
        from tillroll.cli.receipt import cmd_serve

        return _run_command(cmd_serve, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
