"""DNS request execution with a bounded retry budget."""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Mapping, Optional, Tuple

import dns.asyncquery
import dns.entropy
import dns.exception
import dns.message
import dns.query
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt

from probekit.errors import ExecutionCancelledError, ExecutionError
from probekit.protocols.dns.compiler import CompiledRequest
from probekit.protocols.dns.request import make_request
from probekit.protocols.dns.variables import generate_variables

# Timeouts, socket errors and malformed or mismatched answers.
RETRYABLE_ERRORS = (dns.exception.DNSException, OSError, EOFError)

Transport = Callable[..., Awaitable[Tuple[dns.message.Message, bool]]]


@dataclass(frozen=True)
class RawResponse:
    """Outcome of one successful exchange."""

    query: dns.message.Message
    response: dns.message.Message
    resolver: str
    attempts: int
    used_tcp: bool = False


async def udp_transport(
    query: dns.message.Message,
    where: str,
    *,
    timeout: float,
    port: int,
) -> Tuple[dns.message.Message, bool]:
    """Send over UDP, retrying over TCP if the answer is truncated."""
    return await dns.asyncquery.udp_with_fallback(query, where, timeout=timeout, port=port)


async def execute_message(
    compiled: CompiledRequest,
    message: dns.message.Message,
    target: str,
    *,
    transport: Optional[Transport] = None,
    cancel: Optional[asyncio.Event] = None,
    deadline: Optional[float] = None,
) -> RawResponse:
    """Send a query, trying up to ``compiled.retries`` times.

    Attempts run one after another and stop at the first answer. Attempt
    ``n`` goes to resolver ``n - 1`` (mod the resolver count) with a fresh
    message id.

    Args:
        compiled: Compiled request the message was made from
        message: Query built by ``make_request``
        target: Target the query is about, for error reporting
        transport: Async callable ``(query, where, *, timeout, port)``
            returning ``(response, used_tcp)``
        cancel: Event that aborts the exchange when set
        deadline: Absolute ``loop.time()`` after which the exchange aborts

    Raises:
        ExecutionCancelledError: ``cancel`` was set or ``deadline`` passed
        ExecutionError: every attempt failed; ``__cause__`` is the last failure
    """
    transport = transport or udp_transport
    options = compiled.options
    attempts = 0
    result: Optional[RawResponse] = None

    retrying = AsyncRetrying(
        stop=stop_after_attempt(compiled.retries),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        reraise=True,
    )
    try:
        async for attempt in retrying:
            with attempt:
                attempts = attempt.retry_state.attempt_number
                _check_cancelled(target, attempts - 1, cancel, deadline)

                where = options.resolvers[(attempts - 1) % len(options.resolvers)]
                query = _fresh_query(message)
                response, used_tcp = await _exchange(
                    transport(query, where, timeout=options.timeout, port=options.port),
                    target,
                    attempts,
                    cancel,
                    deadline,
                )
                if not query.is_response(response):
                    raise dns.query.BadResponse
                result = RawResponse(
                    query=query,
                    response=response,
                    resolver=where,
                    attempts=attempts,
                    used_tcp=used_tcp,
                )
    except RETRYABLE_ERRORS as e:
        raise ExecutionError(
            f"DNS query for {target} failed after {attempts} attempt(s): {type(e).__name__}: {e}",
            target=target,
            attempts=attempts,
        ) from e

    return result


async def execute_request(
    compiled: CompiledRequest,
    target: str,
    variables: Optional[Mapping[str, str]] = None,
    *,
    transport: Optional[Transport] = None,
    cancel: Optional[asyncio.Event] = None,
    deadline: Optional[float] = None,
) -> RawResponse:
    """Build the query for ``target`` and send it."""
    if variables is None:
        variables = generate_variables(target)
    message = make_request(compiled, target, variables)
    return await execute_message(
        compiled,
        message,
        target,
        transport=transport,
        cancel=cancel,
        deadline=deadline,
    )


def _fresh_query(message: dns.message.Message) -> dns.message.Message:
    query = dns.message.from_wire(message.to_wire())
    query.id = dns.entropy.random_16()
    return query


def _check_cancelled(
    target: str,
    attempts: int,
    cancel: Optional[asyncio.Event],
    deadline: Optional[float],
) -> None:
    if cancel is not None and cancel.is_set():
        raise ExecutionCancelledError(f"DNS query for {target} cancelled", target=target, attempts=attempts)
    if deadline is not None and asyncio.get_running_loop().time() >= deadline:
        raise ExecutionCancelledError(
            f"DNS query for {target} passed its deadline", target=target, attempts=attempts
        )


async def _exchange(
    exchange: Awaitable[Tuple[dns.message.Message, bool]],
    target: str,
    attempts: int,
    cancel: Optional[asyncio.Event],
    deadline: Optional[float],
) -> Tuple[dns.message.Message, bool]:
    """Await one exchange, abandoning it if cancel or deadline fires first."""
    if cancel is None and deadline is None:
        return await exchange

    exchange_task = asyncio.ensure_future(exchange)
    waiters = {exchange_task}
    if cancel is not None:
        waiters.add(asyncio.ensure_future(cancel.wait()))

    timeout = None
    if deadline is not None:
        timeout = max(0.0, deadline - asyncio.get_running_loop().time())

    try:
        done, _ = await asyncio.wait(waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
    finally:
        pending = [task for task in waiters if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    if exchange_task in done:
        return exchange_task.result()

    # The attempt in flight counts as abandoned, not failed.
    raise ExecutionCancelledError(
        f"DNS query for {target} aborted during attempt {attempts}",
        target=target,
        attempts=attempts,
    )
