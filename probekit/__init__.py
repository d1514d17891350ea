"""probekit - template-driven network probing engine.

A request template is compiled once into a read-only request and then
executed against any number of targets concurrently, with each exchange
normalized into a result event for matching and reporting.
"""

__version__ = "0.2.0"

# Core modules
from probekit.config import (
    Classification,
    DNSClass,
    DNSRequestConfig,
    DNSRequestType,
    ExecutorOptions,
    Interaction,
    RecursionMode,
    ResultEvent,
    SeverityLevel,
    TemplateInfo,
)

from probekit.errors import (
    CompileError,
    ConfigurationError,
    ExecutionCancelledError,
    ExecutionError,
    NormalizationError,
    ProbeError,
    RequestBuildError,
)

# DNS protocol
from probekit.protocols.dns import (
    CompiledRequest,
    RawResponse,
    compile_request,
    execute_message,
    execute_request,
    generate_variables,
    make_request,
    response_to_dsl_map,
    run_probe,
    to_result_event,
)

# Reporting
from probekit.report import markdown_description, summary

__all__ = [
    # Version
    "__version__",
    # Config
    "Classification",
    "DNSClass",
    "DNSRequestConfig",
    "DNSRequestType",
    "ExecutorOptions",
    "Interaction",
    "RecursionMode",
    "ResultEvent",
    "SeverityLevel",
    "TemplateInfo",
    # Errors
    "CompileError",
    "ConfigurationError",
    "ExecutionCancelledError",
    "ExecutionError",
    "NormalizationError",
    "ProbeError",
    "RequestBuildError",
    # DNS
    "CompiledRequest",
    "RawResponse",
    "compile_request",
    "execute_message",
    "execute_request",
    "generate_variables",
    "make_request",
    "response_to_dsl_map",
    "run_probe",
    "to_result_event",
    # Reporting
    "markdown_description",
    "summary",
]
