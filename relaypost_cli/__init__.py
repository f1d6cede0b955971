"""
Module 09C - Relaypost CLI

Command-line interface for the request proxy-and-recorder.

Usage:
    python -m relaypost_cli serve --port 5000
    python -m relaypost_cli send POST https://httpbin.org/post -d '{"a": 1}'
    python -m relaypost_cli history list
    python -m relaypost_cli config --show
"""

__version__ = "0.1.0"
