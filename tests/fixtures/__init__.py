"""
Test fixtures package for relaypost tests.

This package provides factory functions and fakes for creating test objects.
Organized into layers:
- common.py: Factories for request descriptions and transport responses
- fakes.py: Scripted transport, controllable clock and failing store

Usage:
    from fixtures import make_description, FakeTransport

    def test_something():
        transport = FakeTransport([make_transport_response(status_code=201)])
        executor = RequestExecutor(transport)
        outcome = executor.execute(make_description(method="POST"))
"""

from .common import (
    make_description,
    make_new_exchange,
    make_outcome,
    make_transport_response,
)

from .fakes import (
    FailingStore,
    FakeClock,
    FakeTransport,
    partial_failure,
    timeout_failure,
)

__all__ = [
    # Common
    "make_description",
    "make_new_exchange",
    "make_outcome",
    "make_transport_response",
    # Fakes
    "FailingStore",
    "FakeClock",
    "FakeTransport",
    "partial_failure",
    "timeout_failure",
]
