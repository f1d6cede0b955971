"""
Runtime Configuration Module

Provides configuration loading and management for relaypost.
"""

from .runtime import (
    EngineConfig,
    RuntimeConfig,
    ServerConfig,
    StoreConfig,
    get_default_config_template,
    load_runtime_config,
)

__all__ = [
    "EngineConfig",
    "RuntimeConfig",
    "ServerConfig",
    "StoreConfig",
    "get_default_config_template",
    "load_runtime_config",
]
