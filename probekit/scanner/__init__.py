"""Template execution helpers shared by protocol modules."""

from probekit.scanner.context import PLACEHOLDER_PATTERN, ExecutionContext

__all__ = [
    "PLACEHOLDER_PATTERN",
    "ExecutionContext",
]
