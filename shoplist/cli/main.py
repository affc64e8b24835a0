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


def _add_api_key_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--api-key", default=None, help="API key (default: from settings or SHOPLIST_API_KEY)")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Shopping list parser CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse [text ...] [--file PATH|-]   Parse a list into sorted categories
  classify <name> [--explain]        Show the category for one item
  fridge <image>                     Suggest purchases from a fridge photo
  validate-key                       Check the parsing service API key
  serve [--host] [--port]            Start the list upload server

Notes:
  Items are split on commas, semicolons and new lines.
  With --ai and an API key the parsing service splits the text instead;
  if it fails, manual splitting is used and a warning is printed.
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse a shopping list")
    parse_parser.add_argument("text", nargs="*", help="List text (e.g. 'bread, milk, 2x chicken')")
    parse_parser.add_argument("--file", default=None, help="Read list text from a file ('-' for stdin)")
    ai_group = parse_parser.add_mutually_exclusive_group()
    ai_group.add_argument("--ai", dest="ai", action="store_true", default=None, help="Use the parsing service")
    ai_group.add_argument("--no-ai", dest="ai", action="store_false", help="Only split text locally")
    parse_parser.set_defaults(ai=None)
    _add_api_key_option(parse_parser)
    parse_parser.add_argument("--json", action="store_true", help="Print items as JSON")

    classify_parser = subparsers.add_parser("classify", help="Show the category for an item name")
    classify_parser.add_argument("name", nargs="+", help="Item name")
    classify_parser.add_argument("--explain", action="store_true", help="List every matching keyword")

    fridge_parser = subparsers.add_parser("fridge", help="Analyze a fridge photo")
    fridge_parser.add_argument("image", help="Path to fridge photo")
    _add_api_key_option(fridge_parser)
    fridge_parser.add_argument("--json", action="store_true", help="Print result as JSON")

    validate_parser = subparsers.add_parser("validate-key", help="Check the parsing service API key")
    _add_api_key_option(validate_parser)

    serve_parser = subparsers.add_parser("serve", help="Start list upload server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port to bind to (default: 8080)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    from shoplist.cli import shopping

    if args.command == "parse":
        return _run_command(shopping.cmd_parse, args)
    elif args.command == "classify":
        return _run_command(shopping.cmd_classify, args)
    elif args.command == "fridge":
        return _run_command(shopping.cmd_fridge, args)
    elif args.command == "validate-key":
        return _run_command(shopping.cmd_validate_key, args)
    elif args.command == "serve":
        return _run_command(shopping.cmd_serve, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
