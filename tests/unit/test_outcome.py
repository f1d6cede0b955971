"""
Request Execution Engine Tests: Outcomes

Tests for render_body and the Completed / TransportFailed variants:
- Objects pretty-printed with 2-space indentation and round-trippable
- Non-object bodies passed through unchanged
- Transport failures default to status 0 and the failure message
- Partial responses on failures are propagated
"""

import json

from core.engine.outcome import Completed, TransportFailed, render_body


class TestRenderBody:

    def test_object_is_indented_and_round_trips(self):
        raw = b'{"user":{"id":7,"tags":["a","b"]}}'
        rendered = render_body(raw)
        assert rendered.startswith('{\n  "user": {\n    "id": 7')
        assert json.loads(rendered) == {"user": {"id": 7, "tags": ["a", "b"]}}

    def test_array_is_indented(self):
        assert render_body("[1,2]") == "[\n  1,\n  2\n]"

    def test_dict_input_is_serialized(self):
        assert render_body({"a": 1}) == '{\n  "a": 1\n}'

    def test_plain_text_passes_through(self):
        assert render_body(b"<html>hi</html>") == "<html>hi</html>"

    def test_scalar_json_passes_through_verbatim(self):
        assert render_body(b"42") == "42"
        assert render_body(b'"quoted"') == '"quoted"'
        assert render_body(b"true") == "true"

    def test_non_ascii_is_preserved(self):
        assert render_body('{"name":"Zoë"}'.encode("utf-8")) == '{\n  "name": "Zoë"\n}'

    def test_declared_charset_is_used(self):
        assert render_body("café crème".encode("latin-1"), "ISO-8859-1") == "café crème"

    def test_unknown_charset_falls_back_to_utf8(self):
        assert render_body("Zoë".encode("utf-8"), "x-no-such-codec") == "Zoë"

    def test_completed_outcome_uses_its_encoding(self):
        completed = Completed(status=200, body="naïve".encode("cp1252"), encoding="cp1252")
        assert completed.to_outcome(1).data == "naïve"

    def test_invalid_utf8_is_replaced(self):
        rendered = render_body(b"\xff\xfeabc")
        assert rendered.endswith("abc")
        assert "�" in rendered

    def test_none_and_empty(self):
        assert render_body(None) == ""
        assert render_body(b"") == ""


class TestCompleted:

    def test_any_status_is_a_completion(self):
        result = Completed(status=503, status_text="Service Unavailable", body=b"down")
        assert result.succeeded is True
        assert result.error is None
        outcome = result.to_outcome(120)
        assert outcome.status == 503
        assert outcome.status_text == "Service Unavailable"
        assert outcome.data == "down"
        assert outcome.time == 120

    def test_headers_are_copied(self):
        headers = {"X-Id": "1"}
        outcome = Completed(status=200, headers=headers).to_outcome(1)
        outcome.headers["X-Id"] = "2"
        assert headers == {"X-Id": "1"}


class TestTransportFailed:

    def test_no_response_yields_status_zero(self):
        result = TransportFailed(message="Failed to resolve 'nowhere.invalid'")
        assert result.succeeded is False
        assert result.error == "Failed to resolve 'nowhere.invalid'"
        outcome = result.to_outcome(8)
        assert outcome.status == 0
        assert outcome.status_text == "Failed to resolve 'nowhere.invalid'"
        assert outcome.headers == {}
        assert outcome.data == "Failed to resolve 'nowhere.invalid'"
        assert outcome.time == 8

    def test_partial_response_is_propagated(self):
        result = TransportFailed(
            message="Exceeded 30 redirects.",
            status=302,
            status_text="Found",
            headers={"Location": "/loop"},
            body=b'{"redirect":true}',
        )
        outcome = result.to_outcome(40)
        assert outcome.status == 302
        assert outcome.status_text == "Found"
        assert outcome.headers == {"Location": "/loop"}
        assert json.loads(outcome.data) == {"redirect": True}

    def test_partial_status_without_body_uses_message(self):
        outcome = TransportFailed(message="boom", status=502, body=b"").to_outcome(3)
        assert outcome.status == 502
        assert outcome.status_text == "boom"
        assert outcome.data == "boom"
