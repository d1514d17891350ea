"""Shared fixtures for probekit tests."""
import asyncio

import dns.exception
import dns.message
import dns.rrset
import pytest

from probekit.config import DNSRequestConfig, ExecutorOptions, SeverityLevel, TemplateInfo
from probekit.protocols.dns import compile_request


class FakeTransport:
    """Async transport that fails a set number of times, then answers."""

    def __init__(self, failures: int = 0, error: type = dns.exception.Timeout, address: str = "1.1.1.1"):
        self.failures = failures
        self.error = error
        self.address = address
        self.calls = []

    async def __call__(self, query, where, *, timeout, port):
        self.calls.append({"query": query, "where": where, "timeout": timeout, "port": port})
        if len(self.calls) <= self.failures:
            raise self.error()
        response = dns.message.make_response(query)
        response.answer.append(
            dns.rrset.from_text(query.question[0].name, 300, "IN", "A", self.address)
        )
        return response, False

    @property
    def resolvers(self):
        return [call["where"] for call in self.calls]


class HangingTransport:
    """Async transport that never answers."""

    def __init__(self):
        self.calls = 0

    async def __call__(self, query, where, *, timeout, port):
        self.calls += 1
        await asyncio.Event().wait()


@pytest.fixture
def options():
    return ExecutorOptions(resolvers=["10.0.0.1", "10.0.0.2", "10.0.0.3", "10.0.0.4"], timeout=1.0)


@pytest.fixture
def descriptor():
    return DNSRequestConfig(
        id="testing-dns",
        request_type="A",
        dns_class="INET",
        retries=5,
        recursion=False,
        name="{{FQDN}}",
    )


@pytest.fixture
def compiled(descriptor, options):
    return compile_request(descriptor, options)


@pytest.fixture
def info():
    return TemplateInfo(name="test", severity=SeverityLevel.LOW, author="pdteam", tags="dns,test")
