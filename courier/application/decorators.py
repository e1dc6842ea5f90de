"""Handler decoration (before/after side effects).

Wraps a command handler with auxiliary behaviors (logging, auditing,
timing...) without changing its input contract. Every helper returns a NEW
handler; the wrapped handler is never modified.

Ordering:
    Decorations nest like an onion. The most recently applied decoration is
    the outermost one: its ``before`` runs first and its ``after`` runs last.

    >>> handler = decorate_before(handle_do_something, log_command)
    >>> handler = decorate_around(handler, audit_start, audit_end)
    >>> handler(DoSomething(name="World"))
    # audit_start -> log_command -> handle_do_something -> audit_end

Failure semantics:
    - ``before`` raises: the handler does not run, the error propagates.
    - handler raises under decorate_around: ``after`` is skipped.
    - handler raises under decorate_scoped: ``after`` still runs (finally),
      then the error propagates.

Decorators receive the exact command instance the handler receives and
must not try to reroute dispatch.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from courier.domain.protocols.command_registry_protocol import (
    AsyncCommandHandler,
    CommandHandler,
)

C = TypeVar("C")


def decorate_before(
    handler: CommandHandler[C],
    before: Callable[[C], Any],
) -> CommandHandler[C]:
    """Return a handler that runs ``before`` then ``handler``.

    Args:
        handler: Handler to wrap.
        before: Side effect receiving the same command.

    Returns:
        New handler with the same signature.
    """

    @functools.wraps(handler)
    def decorated(command: C) -> None:
        before(command)
        handler(command)

    return decorated


def decorate_around(
    handler: CommandHandler[C],
    before: Callable[[C], Any],
    after: Callable[[C], Any],
) -> CommandHandler[C]:
    """Return a handler that runs ``before``, ``handler``, then ``after``.

    Plain sequential composition: if ``handler`` raises, ``after`` does not
    run. Use decorate_scoped when ``after`` releases something.

    Args:
        handler: Handler to wrap.
        before: Side effect run first.
        after: Side effect run last, only when handler returned normally.

    Returns:
        New handler with the same signature.
    """

    @functools.wraps(handler)
    def decorated(command: C) -> None:
        before(command)
        handler(command)
        after(command)

    return decorated


def decorate_scoped(
    handler: CommandHandler[C],
    before: Callable[[C], Any],
    after: Callable[[C], Any],
) -> CommandHandler[C]:
    """Return a handler whose ``after`` runs on every exit path.

    ``after`` is guaranteed once ``before`` has completed. If ``before``
    itself raises, nothing else runs.

    Args:
        handler: Handler to wrap.
        before: Side effect run first (acquire).
        after: Side effect run last, even if handler raised (release).

    Returns:
        New handler with the same signature.
    """

    @functools.wraps(handler)
    def decorated(command: C) -> None:
        before(command)
        try:
            handler(command)
        finally:
            after(command)

    return decorated


async def _run_decoration(decoration: Callable[[C], Any], command: C) -> None:
    # Async variants accept plain functions and coroutine functions alike
    result = decoration(command)
    if inspect.isawaitable(result):
        await result


def decorate_before_async(
    handler: AsyncCommandHandler[C],
    before: Callable[[C], Any],
) -> AsyncCommandHandler[C]:
    """Async counterpart of decorate_before.

    Args:
        handler: Coroutine handler to wrap.
        before: Sync or async side effect receiving the same command.

    Returns:
        New coroutine handler.
    """

    @functools.wraps(handler)
    async def decorated(command: C) -> None:
        await _run_decoration(before, command)
        await handler(command)

    return decorated


def decorate_around_async(
    handler: AsyncCommandHandler[C],
    before: Callable[[C], Any],
    after: Callable[[C], Any],
) -> AsyncCommandHandler[C]:
    """Async counterpart of decorate_around (``after`` skipped on failure).

    Args:
        handler: Coroutine handler to wrap.
        before: Sync or async side effect run first.
        after: Sync or async side effect run last.

    Returns:
        New coroutine handler.
    """

    @functools.wraps(handler)
    async def decorated(command: C) -> None:
        await _run_decoration(before, command)
        await handler(command)
        await _run_decoration(after, command)

    return decorated
