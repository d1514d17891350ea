"""Configuration models for probekit.

This package re-exports all commonly used classes for convenient importing.
"""

# Common enumerations
from probekit.config.common import (
    DNSClass,
    DNSRequestType,
    RecursionMode,
    SeverityLevel,
)

# Executor options
from probekit.config.options import DEFAULT_RESOLVERS, ExecutorOptions

# Template configuration
from probekit.config.template import (
    Classification,
    DNSRequestConfig,
    TemplateInfo,
)

# Results
from probekit.config.result import Interaction, ResultEvent

__all__ = [
    # Enums
    "DNSClass",
    "DNSRequestType",
    "RecursionMode",
    "SeverityLevel",
    # Options
    "DEFAULT_RESOLVERS",
    "ExecutorOptions",
    # Template
    "Classification",
    "DNSRequestConfig",
    "TemplateInfo",
    # Results
    "Interaction",
    "ResultEvent",
]
