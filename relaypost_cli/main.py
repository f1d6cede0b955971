"""
Module 09C - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m relaypost_cli serve [--host HOST] [--port PORT] [--reload]
    python -m relaypost_cli send METHOD URL [-H 'Name: value'] [-d BODY] [--body-type TYPE]
    python -m relaypost_cli history list [--limit N] [--json]
    python -m relaypost_cli history show ID
    python -m relaypost_cli history delete ID
    python -m relaypost_cli history clear
    python -m relaypost_cli config --init | --show

Environment Variables:
    PORT                        Listen port (default: 5000)
    RELAYPOST_STORE_URL         Record store URL (default: sqlite:///relaypost.db)
    RELAYPOST_TIMEOUT_MS        Outbound timeout in ms (default: 30000)
    RELAYPOST_LOG_LEVEL         Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import get_default_config_template, load_runtime_config
from relaypost_cli.commands import history, send, serve


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="relaypost",
        description="Relaypost - HTTP request proxy-and-recorder.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./relaypost.json or ~/.config/relaypost/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API server",
        description="Start the proxy API with uvicorn.",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Listen host")
    serve_parser.add_argument("--port", "-p", type=int, default=None, help="Listen port")
    serve_parser.add_argument("--store-url", type=str, default=None, help="Record store URL")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=False,
        help="Reload on code changes (development)",
    )
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- send command ---
    send_parser = subparsers.add_parser(
        "send",
        help="Execute one request and print the outcome",
        description="Send an HTTP request through the engine and record it.",
    )
    send_parser.add_argument("method", type=str, help="HTTP method (GET, POST, ...)")
    send_parser.add_argument("url", type=str, help="Absolute target URL")
    send_parser.add_argument(
        "--header", "-H",
        action="append",
        default=None,
        help="Request header as 'Name: value' (repeatable)",
    )
    send_parser.add_argument("--data", "-d", type=str, default=None, help="Request body")
    send_parser.add_argument(
        "--body-type",
        type=str,
        choices=["raw", "form-data", "urlencoded"],
        default="raw",
        help="Body encoding (default: raw)",
    )
    send_parser.add_argument(
        "--no-record",
        action="store_true",
        default=False,
        help="Do not store the exchange in history",
    )
    send_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    send_parser.set_defaults(func=send.send_cmd)

    # --- history command ---
    history_parser = subparsers.add_parser(
        "history",
        help="Inspect recorded exchanges",
        description="List, show, delete or clear recorded exchanges.",
    )
    history_subparsers = history_parser.add_subparsers(dest="history_action", help="Action")

    history_list = history_subparsers.add_parser("list", help="List recent exchanges")
    history_list.add_argument("--limit", "-n", type=int, default=None, help="Max records")
    history_list.add_argument("--json", action="store_true", help="JSON output")
    history_list.set_defaults(func=history.history_list_cmd)

    history_show = history_subparsers.add_parser("show", help="Show one exchange")
    history_show.add_argument("record_id", type=str, help="Record id")
    history_show.set_defaults(func=history.history_show_cmd)

    history_delete = history_subparsers.add_parser("delete", help="Delete one exchange")
    history_delete.add_argument("record_id", type=str, help="Record id")
    history_delete.set_defaults(func=history.history_delete_cmd)

    history_clear = history_subparsers.add_parser("clear", help="Delete all exchanges")
    history_clear.set_defaults(func=history.history_clear_cmd)

    history_parser.set_defaults(func=lambda args: history_parser.print_help() or EXIT_SUCCESS)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="relaypost.json",
        help="Path for config file (default: relaypost.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (RELAYPOST_* prefix, PORT).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: relaypost config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error or transport failure, 2=invalid input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_runtime_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    setup_logging(level=args.log_level or config.log_level, log_file=args.log_file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
