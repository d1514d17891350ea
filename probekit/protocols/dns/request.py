"""Per-target DNS query construction."""

from typing import Mapping

import dns.exception
import dns.flags
import dns.message
import dns.name

from probekit.errors import RequestBuildError
from probekit.protocols.dns.compiler import CompiledRequest
from probekit.scanner.context import ExecutionContext
from probekit.utils import logger


def make_request(
    compiled: CompiledRequest,
    target: str,
    variables: Mapping[str, str],
) -> dns.message.Message:
    """Bind variables into the compiled name and build the query message.

    The question name always ends with exactly one trailing dot. The
    message id is 0; the executor assigns a real id per attempt.

    Raises:
        RequestBuildError: the bound name cannot be encoded as a DNS name.
    """
    context = ExecutionContext(variables=dict(variables))
    name = context.interpolate(compiled.name)

    unresolved = context.unresolved(name)
    if unresolved:
        logger.debug(f"Unresolved placeholders in dns name for {target}: {', '.join(unresolved)}")

    fqdn = name.rstrip(".") + "."
    try:
        qname = dns.name.from_text(fqdn)
    except dns.exception.DNSException as e:
        raise RequestBuildError(
            f"Cannot build dns query name {fqdn!r}: {e}",
            target=target,
            details={"name": fqdn},
        ) from e

    message = dns.message.make_query(qname, compiled.request_type, compiled.question_class)
    message.id = 0
    message.flags = dns.flags.RD if compiled.recursion_desired else dns.flags.Flag(0)
    return message


def question_name(message: dns.message.Message) -> str:
    """Text form of the first question name, with its trailing dot."""
    return message.question[0].name.to_text()
