"""
Module 09A - Relay Orchestration

Wires the request execution engine to the record store.

Public API:
- RelayService: Execute requests and manage their history
- RelayResult: Outcome of one relayed request plus its history id
- build_service: Build a RelayService from a RuntimeConfig
"""

from orchestrator.relay import DEFAULT_HISTORY_LIMIT, RelayResult, RelayService
from orchestrator.factory import build_service


__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "RelayResult",
    "RelayService",
    "build_service",
]
