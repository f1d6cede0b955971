"""
Module 09C - CLI History Command

Inspect and prune recorded exchanges.

Usage:
    relaypost history list [--limit N] [--json]
    relaypost history show ID
    relaypost history delete ID
    relaypost history clear
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from core.schemas.errors import RecordNotFoundError
from orchestrator.factory import build_service


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def history_list_cmd(args: Namespace) -> int:
    service = build_service(args.runtime_config)
    try:
        records = service.list_history(args.limit)
    finally:
        service.store.close()

    if args.json:
        print(json.dumps([r.to_wire() for r in records], indent=2))
        return EXIT_SUCCESS

    if not records:
        print("No history")
        return EXIT_SUCCESS

    for r in records:
        created = r.created_at.strftime("%Y-%m-%d %H:%M:%S")
        print(f"{r.id}  {created}  {r.method:<7} {r.response.status:>3}  {r.response.time:>6}ms  {r.url}")
    return EXIT_SUCCESS


def history_show_cmd(args: Namespace) -> int:
    service = build_service(args.runtime_config)
    try:
        record = service.get_record(args.record_id)
    except RecordNotFoundError as e:
        print(f"Error: {e.message}: {args.record_id}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    finally:
        service.store.close()

    print(json.dumps(record.to_wire(), indent=2))
    return EXIT_SUCCESS


def history_delete_cmd(args: Namespace) -> int:
    service = build_service(args.runtime_config)
    try:
        service.delete_record(args.record_id)
    finally:
        service.store.close()
    print("Request deleted from history")
    return EXIT_SUCCESS


def history_clear_cmd(args: Namespace) -> int:
    service = build_service(args.runtime_config)
    try:
        count = service.clear_history()
    finally:
        service.store.close()
    print(f"All history cleared ({count} removed)")
    return EXIT_SUCCESS
