"""
Exception hierarchy for probekit.

Compile-time and execution-time failures live on separate branches so a
caller can retry network problems without ever retrying a broken template.
"""
from typing import Optional


class ProbeError(Exception):
    """Base exception for all probekit errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ProbeError):
    """Executor options could not be loaded or validated."""
    pass


class CompileError(ProbeError):
    """
    A request descriptor failed validation.

    Raised once, when the template is loaded. Only that template is
    dropped; the rest of the scan continues.
    """

    def __init__(self, message: str, template_id: str = "", details: Optional[dict] = None):
        super().__init__(message, details)
        self.template_id = template_id


class ExecutionError(ProbeError):
    """
    A probe against one target failed.

    Raised after the retry budget is spent. Non-fatal to the scan: the
    scheduler moves on to the next target.
    """

    def __init__(
        self,
        message: str,
        target: str = "",
        attempts: int = 0,
        details: Optional[dict] = None,
    ):
        super().__init__(message, details)
        self.target = target
        self.attempts = attempts


class RequestBuildError(ExecutionError):
    """The bound query name cannot be encoded on the wire."""
    pass


class ExecutionCancelledError(ExecutionError):
    """The cancel signal fired or the deadline passed before an answer arrived."""
    pass


class NormalizationError(ProbeError):
    """A result event could not be built from an execution outcome."""
    pass
