"""
Request Execution Engine Tests: Executor

Tests for RequestExecutor:
- Every HTTP status is a completed exchange
- Transport failures (including timeouts) normalize to status 0
- execute() never raises for a validated description
- Timing uses the injected clock and reports whole milliseconds
"""

import json

import pytest

from core.engine.executor import DEFAULT_TIMEOUT_MS, RequestExecutor
from core.http.client import TransportFailure

from fixtures import (
    FakeClock,
    FakeTransport,
    make_description,
    make_transport_response,
    partial_failure,
    timeout_failure,
)


class TestCompletedExchanges:

    def test_success_response_is_normalized(self, executor, transport):
        transport.script.append(make_transport_response(
            status_code=201,
            reason="Created",
            body={"id": 9},
            headers={"Content-Type": "application/json", "X-Req": "r1"},
        ))
        outcome = executor.execute(make_description(method="POST", body='{"name":"x"}'))

        assert outcome.status == 201
        assert outcome.status_text == "Created"
        assert outcome.headers == {"Content-Type": "application/json", "X-Req": "r1"}
        assert outcome.data == '{\n  "id": 9\n}'
        assert outcome.time == 25

    @pytest.mark.parametrize("status", [101, 204, 301, 404, 418, 500, 503])
    def test_non_2xx_is_not_an_error(self, executor, transport, status):
        transport.script.append(make_transport_response(status_code=status, reason="X", body="body"))
        execution = executor.run(make_description())
        assert execution.succeeded is True
        assert execution.error is None
        assert execution.outcome.status == status

    def test_outbound_request_is_normalized_before_send(self, executor, transport):
        executor.execute(make_description(method="put", body='{"a":1}'))
        outbound, timeout_ms = transport.sent[0]
        assert outbound.method == "put"
        assert outbound.payload == {"a": 1}
        assert outbound.structured is True
        assert timeout_ms == DEFAULT_TIMEOUT_MS

    def test_invalid_json_body_sent_as_text(self, executor, transport):
        executor.execute(make_description(method="POST", body="{not json"))
        assert transport.last.payload == "{not json"
        assert transport.last.structured is False


class TestTransportFailures:

    def test_connection_refused(self, executor, transport):
        transport.script.append(TransportFailure("Connection refused"))
        execution = executor.run(make_description())

        assert execution.succeeded is False
        assert execution.error == "Connection refused"
        assert execution.outcome.status == 0
        assert execution.outcome.status_text == "Connection refused"
        assert execution.outcome.headers == {}
        assert execution.outcome.data == "Connection refused"

    def test_timeout_reports_status_zero_and_full_wait(self, executor, transport):
        transport.script.append(timeout_failure())
        outcome = executor.execute(make_description(url="https://slow.example.com/"))

        assert outcome.status == 0
        assert outcome.status_text
        assert outcome.status_text == "timeout of 30000ms exceeded"
        assert outcome.time >= DEFAULT_TIMEOUT_MS

    def test_partial_response_status_is_propagated(self, executor, transport):
        transport.script.append(partial_failure(302, "Found", b'{"loop":1}'))
        execution = executor.run(make_description())

        assert execution.succeeded is False
        assert execution.outcome.status == 302
        assert json.loads(execution.outcome.data) == {"loop": 1}

    def test_unexpected_transport_exception_is_captured(self, executor, transport):
        transport.script.append(RuntimeError("socket exploded"))
        outcome = executor.execute(make_description())
        assert outcome.status == 0
        assert outcome.status_text == "socket exploded"


class TestConfiguration:

    def test_custom_timeout_is_passed_to_transport(self):
        transport = FakeTransport()
        RequestExecutor(transport, timeout_ms=500).execute(make_description())
        assert transport.sent[0][1] == 500

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            RequestExecutor(FakeTransport(), timeout_ms=0)

    def test_elapsed_is_whole_milliseconds(self):
        clock = FakeClock()
        transport = FakeTransport(clock=clock, latency_ms=12.7)
        outcome = RequestExecutor(transport, clock=clock).execute(make_description())
        assert outcome.time == 13
        assert isinstance(outcome.time, int)
