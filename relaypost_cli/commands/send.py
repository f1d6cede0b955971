"""
Module 09C - CLI Send Command

Execute one request through the engine from the command line, recording
it in the configured store unless --no-record is given.

Usage:
    relaypost send METHOD URL [-H 'Name: value']... [-d BODY] [--body-type raw]
                   [--no-record] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from pydantic import ValidationError

from core.schemas.errors import InputValidationError
from core.schemas.exchange import RequestDescription
from orchestrator.factory import build_service
from orchestrator.relay import RelayResult


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_TRANSPORT_FAILED = 1
EXIT_INPUT_ERROR = 2


def parse_header_args(values: list[str] | None) -> dict[str, str]:
    """Parse repeated 'Name: value' arguments."""
    headers: dict[str, str] = {}
    for raw in values or []:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise InputValidationError(
                f"invalid header '{raw}' (expected 'Name: value')",
                field_path="headers",
            )
        headers[name.strip()] = value.strip()
    return headers


def print_result_human(result: RelayResult) -> None:
    """Print outcome in human-readable format."""
    response = result.response
    marker = "✓" if result.success else "✗"
    print(f"{marker} {response.status} {response.status_text} ({response.time} ms)")
    for name, value in response.headers.items():
        print(f"{name}: {value}")
    if response.data:
        print()
        print(response.data)
    if result.history_id:
        print(f"\nhistory_id: {result.history_id}")
    elif result.persist_error:
        print(f"\nwarning: not recorded: {result.persist_error}", file=sys.stderr)


def send_cmd(args: Namespace) -> int:
    """Execute the send command."""
    try:
        headers = parse_header_args(args.header)
        description = RequestDescription.model_validate({
            "method": args.method,
            "url": args.url,
            "headers": headers,
            "body": args.data or "",
            "bodyType": args.body_type,
        })
    except ValidationError as e:
        invalid = InputValidationError.from_errors(e.errors())
        print(f"Error [{invalid.code}]: {invalid.message}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except InputValidationError as e:
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    service = build_service(args.runtime_config)
    try:
        result = service.send(description, record=not args.no_record)
    finally:
        service.store.close()

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_result_human(result)

    return EXIT_SUCCESS if result.success else EXIT_TRANSPORT_FAILED
