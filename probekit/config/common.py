"""Common enumerations used across probe configuration."""

from enum import Enum


class SeverityLevel(str, Enum):
    """Impact level of a template."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"
    UNKNOWN = "unknown"


class RecursionMode(str, Enum):
    """Recursion-desired setting of a DNS request.

    UNSET defers to the executor options at compile time.
    """

    UNSET = "unset"
    FORCE_TRUE = "true"
    FORCE_FALSE = "false"


class DNSRequestType(str, Enum):
    """Query types a DNS template may ask for."""

    A = "A"
    NS = "NS"
    DS = "DS"
    CNAME = "CNAME"
    SOA = "SOA"
    PTR = "PTR"
    MX = "MX"
    TXT = "TXT"
    AAAA = "AAAA"
    CAA = "CAA"
    TLSA = "TLSA"
    ANY = "ANY"


class DNSClass(str, Enum):
    """Query classes, keyed by their template spelling."""

    INET = "inet"
    CSNET = "csnet"
    CHAOS = "chaos"
    HESIOD = "hesiod"
    NONE = "none"
    ANY = "any"
