"""
CLI command modules.
"""

from relaypost_cli.commands import history, send, serve

__all__ = ["history", "send", "serve"]
