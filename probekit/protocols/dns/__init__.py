"""DNS protocol module.

Compile a ``DNSRequestConfig`` once with ``compile_request``, then call
``execute_request`` (or ``run_probe``) for every target.
"""

from probekit.protocols.dns.compiler import CompiledRequest, compile_request
from probekit.protocols.dns.executor import (
    RETRYABLE_ERRORS,
    RawResponse,
    Transport,
    execute_message,
    execute_request,
    udp_transport,
)
from probekit.protocols.dns.probe import run_probe
from probekit.protocols.dns.request import make_request, question_name
from probekit.protocols.dns.result import PROTOCOL, response_to_dsl_map, to_result_event
from probekit.protocols.dns.variables import VARIABLE_KEYS, generate_variables

__all__ = [
    "PROTOCOL",
    "RETRYABLE_ERRORS",
    "VARIABLE_KEYS",
    "CompiledRequest",
    "RawResponse",
    "Transport",
    "compile_request",
    "execute_message",
    "execute_request",
    "generate_variables",
    "make_request",
    "question_name",
    "response_to_dsl_map",
    "run_probe",
    "to_result_event",
    "udp_transport",
]
