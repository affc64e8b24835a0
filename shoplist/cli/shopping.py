"""Shopping list command handlers used by the unified CLI."""

import argparse
import json
import sys
from pathlib import Path

from shoplist.runtime import get_logger

logger = get_logger(__name__)


def _read_text(args: argparse.Namespace) -> str:
    """List text comes from positional words, --file, or stdin (--file -)."""
    if args.file == "-":
        return sys.stdin.read()
    if args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: file not found: {path}")
            sys.exit(1)
        return path.read_text(encoding="utf-8")
    return " ".join(args.text)


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse list text and print it grouped by category."""
    from shoplist.application.shopping import ProcessListRequest, run_process_list
    from shoplist.parsing.formatter import format_shopping_list, items_to_json
    from shoplist.runtime import ParsingServiceClient, load_category_keyword_table, load_settings

    settings = load_settings()
    request = ProcessListRequest(
        text=_read_text(args),
        use_ai=settings.use_ai if args.ai is None else args.ai,
        api_key=args.api_key if args.api_key is not None else settings.api_key,
    )
    table = load_category_keyword_table()

    if request.attempts_delegated:
        with ParsingServiceClient(settings.service) as client:
            result = run_process_list(request, client=client, table=table)
    else:
        result = run_process_list(request, table=table)

    if result.warning:
        print(f"Warning: {result.warning} (used manual parsing)", file=sys.stderr)

    if args.json:
        print(json.dumps({"status": result.status, "items": items_to_json(result.items)}, indent=2))
        return

    if not result.items:
        print("No items found.")
        return
    print(format_shopping_list(result.items))


def cmd_classify(args: argparse.Namespace) -> None:
    """Print the category of a single item name."""
    from shoplist.parsing.categories import classify_item, matching_categories
    from shoplist.runtime import load_category_keyword_table

    name = " ".join(args.name)
    table = load_category_keyword_table()
    print(classify_item(name, table).label)

    if args.explain:
        matches = matching_categories(name, table)
        if not matches:
            print("  no keyword matched")
        for category, keyword in matches:
            print(f"  {category.label}: '{keyword}'")


def cmd_fridge(args: argparse.Namespace) -> None:
    """Analyze a fridge photo and print what was found and what to buy."""
    from shoplist.application.shopping import FridgeAnalysisRequest, run_fridge_analysis
    from shoplist.parsing.categories import classify_item
    from shoplist.runtime import ParsingServiceClient, load_category_keyword_table, load_settings

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"Error: image not found: {image_path}")
        sys.exit(1)

    settings = load_settings()
    api_key = args.api_key if args.api_key is not None else settings.api_key
    with ParsingServiceClient(settings.service) as client:
        result = run_fridge_analysis(
            FridgeAnalysisRequest(image_bytes=image_path.read_bytes(), api_key=api_key),
            client=client,
        )

    if result.status != "ok" or result.analysis is None:
        print(f"Fridge analysis failed: {result.error}")
        sys.exit(1)

    analysis = result.analysis
    if args.json:
        print(
            json.dumps(
                {"itemsFound": list(analysis.items_found), "suggestions": list(analysis.suggestions)},
                indent=2,
            )
        )
        return

    table = load_category_keyword_table()
    print(f"In the fridge ({len(analysis.items_found)}):")
    for name in analysis.items_found:
        print(f"  - {name}")
    print(f"\nSuggested ({len(analysis.suggestions)}):")
    for name in analysis.suggestions:
        print(f"  - {name} [{classify_item(name, table).label}]")


def cmd_validate_key(args: argparse.Namespace) -> None:
    """Check the configured (or given) API key against the service."""
    from shoplist.runtime import ParsingServiceClient, load_settings

    settings = load_settings()
    api_key = args.api_key if args.api_key is not None else settings.api_key
    with ParsingServiceClient(settings.service) as client:
        valid = client.validate_api_key(api_key)

    if not valid:
        print("API key is invalid.")
        sys.exit(1)
    print("API key looks valid.")


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI server for receiving lists from a phone."""
    import uvicorn

    from shoplist.runtime import server

    print(f"Starting shopping list server on {args.host}:{args.port}")
    print(f"Endpoints: http://{args.host}:{args.port}/parse | /fridge")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)
