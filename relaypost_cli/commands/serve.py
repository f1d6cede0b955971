"""
Module 09C - CLI Serve Command

Run the HTTP API with uvicorn.

Usage:
    relaypost serve [--host HOST] [--port PORT] [--store-url URL] [--reload]
"""

from __future__ import annotations

import copy
import logging
import os
from argparse import Namespace

import uvicorn

from core.config.runtime import RuntimeConfig


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0


def resolve_serve_config(args: Namespace) -> RuntimeConfig:
    """Apply command-line overrides on top of the loaded configuration."""
    config: RuntimeConfig = copy.deepcopy(args.runtime_config)
    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port
    if args.store_url:
        config.store.url = args.store_url
    return config


def serve_cmd(args: Namespace) -> int:
    """Execute the serve command."""
    config = resolve_serve_config(args)
    logger.info(f"Server is running on port {config.server.port}")

    if args.reload:
        # The reloader imports api.app:app in a child process, which only sees the environment
        os.environ.update(config.to_env())
        uvicorn.run(
            "api.app:app",
            host=config.server.host,
            port=config.server.port,
            reload=True,
            log_level=config.log_level.lower(),
        )
        return EXIT_SUCCESS

    from api.app import create_app

    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.log_level.lower(),
    )
    return EXIT_SUCCESS
