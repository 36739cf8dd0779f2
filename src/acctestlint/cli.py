"""Command-line interface for acctestlint."""

import argparse
import json
import sys

from . import __version__
from .config import load_config
from .errors import AcctestlintError
from .registry import all_analyzers, get_analyzer
from .runner import check_paths

# Exit codes follow `go vet` style checkers
EXIT_OK = 0
EXIT_ERROR = 2
EXIT_FINDINGS = 3


def cmd_check(args: argparse.Namespace) -> int:
    """Check Go files and directories."""
    try:
        config = load_config(args.config)
        analyzers = [get_analyzer(name) for name in args.analyzer] if args.analyzer else None

        result = check_paths(args.paths, config=config, analyzers=analyzers)

        if args.verbose:
            for path in result.skipped:
                print(f"Skipped {path}", file=sys.stderr)
            for file_result in result.files:
                if file_result.has_parse_error:
                    print(f"Warning: parse errors in {file_result.path}", file=sys.stderr)

        findings = result.findings
        output_format = "json" if args.json else config.format
        if output_format == "json":
            print(json.dumps(result.to_dict(), indent=2))
        else:
            for finding in findings:
                print(finding)

        return EXIT_FINDINGS if findings else EXIT_OK

    except AcctestlintError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


def cmd_doc(args: argparse.Namespace) -> int:
    """Print analyzer documentation."""
    try:
        if args.analyzer:
            analyzer = get_analyzer(args.analyzer)
            print(f"{analyzer.name}: {analyzer.doc}")
            return EXIT_OK

        print("Registered analyzers:")
        print()
        for analyzer in all_analyzers():
            print(f"    {analyzer.name:<24}{analyzer.summary}")
        return EXIT_OK

    except AcctestlintError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the API server."""
    import uvicorn

    print("Starting acctestlint API server...")
    print(f"API docs: http://{args.host}:{args.port}/docs")
    print()

    # When reload is enabled, uvicorn requires the app as an import string
    app_target = "acctestlint.api:app" if args.reload else None
    if app_target is None:
        from .api import app

        app_target = app

    uvicorn.run(
        app_target,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="acctestlint",
        description="Static checks for Terraform provider acceptance tests",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # check
    check_parser = subparsers.add_parser("check", help="Check Go files or directories")
    check_parser.add_argument("paths", nargs="+", help="Files or directories to check")
    check_parser.add_argument(
        "--json", action="store_true", help="Output as JSON"
    )
    check_parser.add_argument(
        "--config", "-c", help="Path to config file (default: ./.acctestlint.json)"
    )
    check_parser.add_argument(
        "--analyzer",
        "-a",
        action="append",
        help="Run only this analyzer (repeatable; default: all)",
    )
    check_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Report skipped files and parse errors"
    )

    # doc
    doc_parser = subparsers.add_parser("doc", help="Show analyzer documentation")
    doc_parser.add_argument("analyzer", nargs="?", help="Analyzer name")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument(
        "--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--port", type=int, default=8000, help="Port to bind to (default: 8000)"
    )
    serve_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    return parser


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return EXIT_OK

    commands = {
        "check": cmd_check,
        "doc": cmd_doc,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)

    parser.print_help()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
