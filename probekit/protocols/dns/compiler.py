"""Compilation of DNS request descriptors."""

from dataclasses import dataclass

import dns.rdataclass
import dns.rdatatype

from probekit.config import (
    DNSClass,
    DNSRequestConfig,
    DNSRequestType,
    ExecutorOptions,
    RecursionMode,
)
from probekit.errors import CompileError
from probekit.utils import logger

# Template class names mapped to their dnspython text form.
_CLASS_TEXT = {
    DNSClass.INET: "IN",
    DNSClass.CSNET: "CLASS2",
    DNSClass.CHAOS: "CH",
    DNSClass.HESIOD: "HS",
    DNSClass.NONE: "NONE",
    DNSClass.ANY: "ANY",
}


@dataclass(frozen=True)
class CompiledRequest:
    """A validated DNS request, shared read-only by every target."""

    template_id: str
    name: str
    request_type: dns.rdatatype.RdataType
    question_class: dns.rdataclass.RdataClass
    retries: int
    recursion_desired: bool
    options: ExecutorOptions


def compile_request(config: DNSRequestConfig, options: ExecutorOptions) -> CompiledRequest:
    """Validate a request descriptor and resolve its defaults.

    Raises:
        CompileError: unknown query type or class, or a malformed name template.
    """
    request_type = _resolve_type(config)
    question_class = _resolve_class(config)
    _validate_name(config)

    retries = config.retries if config.retries > 0 else options.default_retries

    if config.recursion == RecursionMode.UNSET:
        recursion_desired = options.recursion_desired
    else:
        recursion_desired = config.recursion == RecursionMode.FORCE_TRUE

    compiled = CompiledRequest(
        template_id=config.id,
        name=config.name,
        request_type=request_type,
        question_class=question_class,
        retries=retries,
        recursion_desired=recursion_desired,
        options=options,
    )
    logger.debug(
        f"Compiled dns request {config.id or '<anonymous>'}: "
        f"{dns.rdatatype.to_text(request_type)} {dns.rdataclass.to_text(question_class)} "
        f"retries={retries} rd={recursion_desired}"
    )
    return compiled


def _resolve_type(config: DNSRequestConfig) -> dns.rdatatype.RdataType:
    value = config.request_type.strip().upper()
    try:
        request_type = DNSRequestType(value)
    except ValueError:
        raise CompileError(
            f"Invalid dns request type: {config.request_type!r}",
            template_id=config.id,
            details={"field": "type", "value": config.request_type},
        ) from None
    return dns.rdatatype.from_text(request_type.value)


def _resolve_class(config: DNSRequestConfig) -> dns.rdataclass.RdataClass:
    value = config.dns_class.strip().lower()
    try:
        dns_class = DNSClass(value)
    except ValueError:
        raise CompileError(
            f"Invalid dns class: {config.dns_class!r}",
            template_id=config.id,
            details={"field": "class", "value": config.dns_class},
        ) from None
    return dns.rdataclass.from_text(_CLASS_TEXT[dns_class])


def _validate_name(config: DNSRequestConfig) -> None:
    name = config.name
    if not name.strip():
        raise CompileError("DNS request name is empty", template_id=config.id)

    # Every "{{" must close with "}}" before the next one opens.
    depth = 0
    i = 0
    start = 0
    while i < len(name):
        pair = name[i:i + 2]
        if pair == "{{":
            if depth:
                break
            depth = 1
            start = i + 2
            i += 2
        elif pair == "}}":
            if not depth:
                break
            if not name[start:i].strip():
                raise CompileError(
                    f"Empty placeholder in dns request name: {name!r}",
                    template_id=config.id,
                )
            depth = 0
            i += 2
        else:
            i += 1
    else:
        if not depth:
            return

    raise CompileError(
        f"Unbalanced placeholder markers in dns request name: {name!r}",
        template_id=config.id,
    )
