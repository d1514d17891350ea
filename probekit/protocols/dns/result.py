"""Conversion of DNS exchanges into result events."""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import dns.rcode

from probekit.config import Interaction, ResultEvent, TemplateInfo
from probekit.errors import NormalizationError
from probekit.protocols.dns.compiler import CompiledRequest
from probekit.protocols.dns.executor import RawResponse

PROTOCOL = "dns"


def to_result_event(
    raw: Optional[RawResponse],
    compiled: CompiledRequest,
    target: str,
    info: TemplateInfo,
    *,
    matcher_name: Optional[str] = None,
    extractor_name: Optional[str] = None,
    extracted_results: Optional[Iterable[str]] = None,
    metadata: Optional[Dict[str, Any]] = None,
    interaction: Optional[Interaction] = None,
    template_path: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> ResultEvent:
    """Build the result event for one completed exchange.

    Raises:
        NormalizationError: the outcome has no query or no response
    """
    _require_exchange(raw, target)

    return ResultEvent(
        template_id=compiled.template_id,
        template_path=template_path,
        info=info,
        matcher_name=matcher_name or "",
        extractor_name=extractor_name or "",
        type=PROTOCOL,
        host=target,
        matched=target,
        extracted_results=list(extracted_results or []),
        request=raw.query.to_text(),
        response=raw.response.to_text(),
        metadata=dict(metadata or {}),
        ip=raw.resolver,
        timestamp=timestamp or datetime.now(timezone.utc),
        interaction=interaction,
    )


def response_to_dsl_map(
    raw: Optional[RawResponse],
    compiled: CompiledRequest,
    target: str,
    info: TemplateInfo,
    template_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Flatten an exchange into the fields matchers and extractors read."""
    _require_exchange(raw, target)
    response = raw.response

    return {
        "host": target,
        "matched": target,
        "request": raw.query.to_text(),
        "rcode": response.rcode(),
        "rcode_text": dns.rcode.to_text(response.rcode()),
        "question": _sections_to_text(response.question),
        "extra": _sections_to_text(response.additional),
        "answer": _sections_to_text(response.answer),
        "ns": _sections_to_text(response.authority),
        "raw": response.to_text(),
        "template-id": compiled.template_id,
        "template-info": info,
        "template-path": template_path or "",
        "type": PROTOCOL,
    }


def _require_exchange(raw: Optional[RawResponse], target: str) -> None:
    if raw is None:
        raise NormalizationError(f"No dns outcome for {target}")
    if raw.query is None or raw.response is None:
        raise NormalizationError(
            f"Incomplete dns outcome for {target}",
            details={"has_query": raw.query is not None, "has_response": raw.response is not None},
        )


def _sections_to_text(rrsets: List[Any]) -> str:
    return "\n".join(rrset.to_text() for rrset in rrsets)
