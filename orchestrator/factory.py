"""
Service construction from runtime configuration.
"""

from __future__ import annotations

from typing import Optional

from core.config.runtime import RuntimeConfig
from core.engine.executor import RequestExecutor, Transport
from core.http.client import HttpTransport
from core.store import RecordStore, create_store
from orchestrator.relay import RelayService


def build_service(
    config: RuntimeConfig,
    *,
    store: Optional[RecordStore] = None,
    transport: Optional[Transport] = None,
) -> RelayService:
    """
    Create a RelayService with its transport and store.

    Explicit store/transport arguments take precedence over the config,
    which is how tests inject fakes.
    """
    if transport is None:
        transport = HttpTransport(
            proxy=config.engine.proxy,
            verify=config.engine.verify_tls,
        )
    if store is None:
        store = create_store(config.store.url)

    executor = RequestExecutor(transport, timeout_ms=config.engine.timeout_ms)
    return RelayService(executor, store, history_limit=config.store.history_limit)
