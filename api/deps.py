"""
Module 09D - API Dependencies

Dependency injection for the API.
The RelayService (engine + transport + record store) is held on app.state
so tests can hand in one built around fakes; otherwise it is built from the
runtime configuration on first use.
"""

from __future__ import annotations

import logging
import threading

from fastapi import Request

from core.config.runtime import RuntimeConfig, load_runtime_config
from orchestrator.factory import build_service
from orchestrator.relay import RelayService

logger = logging.getLogger(__name__)

_build_lock = threading.Lock()


def get_runtime_config(request: Request) -> RuntimeConfig:
    """Config attached to the app, or the loaded default."""
    config = getattr(request.app.state, "config", None)
    if config is None:
        config = load_runtime_config()
        request.app.state.config = config
    return config


def get_service(request: Request) -> RelayService:
    """
    Get the RelayService for this app, building it on first use.

    Returns:
        The app-wide RelayService
    """
    service = getattr(request.app.state, "service", None)
    if service is not None:
        return service

    with _build_lock:
        service = getattr(request.app.state, "service", None)
        if service is None:
            config = get_runtime_config(request)
            logger.info(f"Building relay service (store={config.store.url})")
            service = build_service(config)
            if service.store.ping():
                logger.info("Record store connected")
            else:
                logger.warning("Record store not reachable; history requests will fail")
            request.app.state.service = service
    return service
