"""Collaborator injection for command handlers.

Turns a handler written as ``handler(command, collaborator_1, ...)`` into a
single-argument handler by resolving its collaborators from a dependency
resolver and partially applying them.

Resolution is EAGER: collaborators are looked up when the binder runs
(registration time), not when a command is dispatched. A missing
collaborator therefore fails the registration with UnresolvedDependencyError
before any command can reach the handler. A handler whose signature cannot
take the command followed by those collaborators (too few or too many
identities, or a handler decorated before it was bound) fails with TypeError
at the same point.

Collaborator identities can be listed explicitly or inferred from the
handler's type hints:

    >>> def handle_add_numbers(command: AddNumbers, adder: Adder, printer: Printer) -> None:
    ...     printer(adder(command.a, command.b))
    >>>
    >>> bind_dependencies(handle_add_numbers, resolver, Adder, Printer)
    >>> bind_dependencies(handle_add_numbers, resolver)  # inferred: (Adder, Printer)
"""

import functools
import inspect
import types
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

from courier.domain.protocols.command_registry_protocol import (
    AsyncCommandHandler,
    CommandHandler,
)
from courier.domain.protocols.dependency_registry_protocol import (
    DependencyResolverProtocol,
)

C = TypeVar("C")

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _unwrap_optional(annotation: Any) -> Any:
    """Return X for ``X | None`` / ``Optional[X]``, annotation otherwise."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def infer_dependencies(handler: Callable[..., Any]) -> tuple[type, ...]:
    """Infer collaborator identities from a handler's type hints.

    The first parameter is the command. Every following parameter must be
    annotated with the collaborator's class (typically a Protocol).

    Already-decorated or already-bound handlers expose their outer
    single-argument signature and therefore infer no dependencies.

    Args:
        handler: Handler taking (command, collaborator, ...).

    Returns:
        Collaborator identities in parameter order (empty for
        single-argument handlers).

    Raises:
        TypeError: If a collaborator parameter is variadic, unannotated, or
            annotated with something that is not a class.
    """
    signature = inspect.signature(handler, follow_wrapped=False)
    parameters = list(signature.parameters.values())[1:]
    if not parameters:
        return ()

    try:
        # Resolves string annotations (from __future__ import annotations)
        hints = get_type_hints(handler)
    except (NameError, TypeError):
        hints = {
            p.name: p.annotation
            for p in parameters
            if p.annotation is not inspect.Parameter.empty
        }

    handler_name = getattr(handler, "__qualname__", repr(handler))
    identities: list[type] = []
    for parameter in parameters:
        if parameter.kind in _VARIADIC:
            raise TypeError(
                f"Cannot inject into variadic parameter '{parameter.name}' "
                f"of {handler_name}"
            )
        annotation = _unwrap_optional(hints.get(parameter.name))
        if not isinstance(annotation, type):
            raise TypeError(
                f"Parameter '{parameter.name}' of {handler_name} needs a class "
                f"annotation to be injected, got {annotation!r}"
            )
        identities.append(annotation)

    return tuple(identities)


def _resolve_all(
    handler: Callable[..., Any],
    resolver: DependencyResolverProtocol,
    identities: tuple[type, ...],
) -> tuple[Any, ...]:
    if not identities:
        identities = infer_dependencies(handler)
    collaborators = tuple(resolver.resolve(identity) for identity in identities)
    if collaborators:
        _check_accepts(handler, identities, collaborators)
    return collaborators


def _check_accepts(
    handler: Callable[..., Any],
    identities: tuple[type, ...],
    collaborators: tuple[Any, ...],
) -> None:
    # Outer signature only: a decorated handler takes the command alone
    try:
        signature = inspect.signature(handler, follow_wrapped=False)
    except (TypeError, ValueError):
        return

    try:
        signature.bind(object(), *collaborators)
    except TypeError as e:
        handler_name = getattr(handler, "__qualname__", repr(handler))
        names = ", ".join(identity.__qualname__ for identity in identities)
        raise TypeError(
            f"{handler_name} cannot accept a command followed by ({names}): {e}"
        ) from e


def bind_dependencies(
    handler: Callable[..., None],
    resolver: DependencyResolverProtocol,
    *identities: type,
) -> CommandHandler[C]:
    """Bind collaborators into a synchronous handler.

    Args:
        handler: Handler taking (command, collaborator, ...).
        resolver: Source of collaborator instances.
        *identities: Collaborator identities in parameter order. Inferred
            from type hints when omitted.

    Returns:
        Single-argument handler. The handler itself when it takes no
        collaborators.

    Raises:
        UnresolvedDependencyError: If any collaborator is not registered.
        TypeError: If identities must be inferred and cannot be, or the
            handler cannot accept the resolved collaborators.
    """
    collaborators = _resolve_all(handler, resolver, identities)
    if not collaborators:
        return handler

    @functools.wraps(handler)
    def bound(command: C) -> None:
        handler(command, *collaborators)

    return bound


def bind_dependencies_async(
    handler: Callable[..., Awaitable[None]],
    resolver: DependencyResolverProtocol,
    *identities: type,
) -> AsyncCommandHandler[C]:
    """Bind collaborators into an asynchronous handler.

    Args:
        handler: Coroutine handler taking (command, collaborator, ...).
        resolver: Source of collaborator instances.
        *identities: Collaborator identities in parameter order. Inferred
            from type hints when omitted.

    Returns:
        Single-argument coroutine handler. The handler itself when it takes
        no collaborators.

    Raises:
        UnresolvedDependencyError: If any collaborator is not registered.
        TypeError: If identities must be inferred and cannot be, or the
            handler cannot accept the resolved collaborators.
    """
    collaborators = _resolve_all(handler, resolver, identities)
    if not collaborators:
        return handler

    @functools.wraps(handler)
    async def bound(command: C) -> None:
        await handler(command, *collaborators)

    return bound
