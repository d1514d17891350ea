"""One-call probe of a single target."""

import asyncio
from typing import Optional

from probekit.config import ResultEvent, TemplateInfo
from probekit.errors import NormalizationError
from probekit.protocols.dns.compiler import CompiledRequest
from probekit.protocols.dns.executor import Transport, execute_request
from probekit.protocols.dns.result import to_result_event
from probekit.protocols.dns.variables import generate_variables
from probekit.utils import logger


async def run_probe(
    compiled: CompiledRequest,
    target: str,
    info: TemplateInfo,
    *,
    template_path: Optional[str] = None,
    transport: Optional[Transport] = None,
    cancel: Optional[asyncio.Event] = None,
    deadline: Optional[float] = None,
) -> Optional[ResultEvent]:
    """Run a compiled request against ``target`` and normalize the answer.

    ``ExecutionError`` propagates so the scheduler can record it and move
    on. A result that cannot be normalized is logged and dropped.
    """
    raw = await execute_request(
        compiled,
        target,
        generate_variables(target),
        transport=transport,
        cancel=cancel,
        deadline=deadline,
    )
    try:
        return to_result_event(raw, compiled, target, info, template_path=template_path)
    except NormalizationError as e:
        logger.warning(f"Dropping result for {compiled.template_id} on {target}: {e}")
        return None
