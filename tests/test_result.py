"""Tests for result normalization and probe glue."""
from datetime import datetime, timezone

import dns.message
import dns.rcode
import pytest
from pydantic import ValidationError

from conftest import FakeTransport
from probekit.config import Interaction
from probekit.errors import ExecutionError, NormalizationError
from probekit.protocols.dns import (
    PROTOCOL,
    RawResponse,
    make_request,
    response_to_dsl_map,
    run_probe,
    to_result_event,
)


@pytest.fixture
def raw(compiled):
    query = make_request(compiled, "one.one.one.one", {"FQDN": "one.one.one.one"})
    response = dns.message.make_response(query)
    return RawResponse(query=query, response=response, resolver="10.0.0.1", attempts=1)


class TestToResultEvent:

    def test_fields(self, raw, compiled, info):
        stamp = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        interaction = Interaction(protocol="dns", unique_id="abc")
        event = to_result_event(
            raw,
            compiled,
            "one.one.one.one",
            info,
            matcher_name="m",
            extracted_results=["x"],
            metadata={"k": "v"},
            interaction=interaction,
            timestamp=stamp,
        )

        assert event.template_id == "testing-dns"
        assert event.type == PROTOCOL
        assert event.host == event.matched == "one.one.one.one"
        assert event.matcher_name == "m"
        assert event.extractor_name == ""
        assert event.extracted_results == ["x"]
        assert event.metadata == {"k": "v"}
        assert event.ip == "10.0.0.1"
        assert event.timestamp == stamp
        assert event.interaction is interaction
        assert event.info is info
        assert "one.one.one.one." in event.request
        assert event.response == raw.response.to_text()

    def test_default_timestamp_is_utc(self, raw, compiled, info):
        event = to_result_event(raw, compiled, "one.one.one.one", info)
        assert event.timestamp.tzinfo is not None

    def test_event_is_frozen(self, raw, compiled, info):
        event = to_result_event(raw, compiled, "one.one.one.one", info)
        with pytest.raises(ValidationError):
            event.host = "other"

    def test_missing_outcome(self, compiled, info):
        with pytest.raises(NormalizationError):
            to_result_event(None, compiled, "one.one.one.one", info)

    def test_missing_response(self, raw, compiled, info):
        broken = RawResponse(query=raw.query, response=None, resolver="10.0.0.1", attempts=1)
        with pytest.raises(NormalizationError):
            to_result_event(broken, compiled, "one.one.one.one", info)


class TestDslMap:

    def test_keys(self, raw, compiled, info):
        data = response_to_dsl_map(raw, compiled, "one.one.one.one", info, template_path="dns/test.yaml")
        assert data["host"] == "one.one.one.one"
        assert data["rcode"] == dns.rcode.NOERROR
        assert data["rcode_text"] == "NOERROR"
        assert data["template-id"] == "testing-dns"
        assert data["template-path"] == "dns/test.yaml"
        assert data["template-info"] is info
        assert data["type"] == "dns"
        assert "one.one.one.one." in data["question"]
        assert data["answer"] == ""
        assert data["raw"] == raw.response.to_text()


class TestRunProbe:

    @pytest.mark.asyncio
    async def test_returns_event(self, compiled, info):
        event = await run_probe(compiled, "www.example.com", info, transport=FakeTransport(address="9.9.9.9"))
        assert event.host == "www.example.com"
        assert "9.9.9.9" in event.response
        assert "www.example.com." in event.request

    @pytest.mark.asyncio
    async def test_execution_error_propagates(self, compiled, info):
        with pytest.raises(ExecutionError):
            await run_probe(compiled, "example.com", info, transport=FakeTransport(failures=100))
