"""Integration tests for end-to-end command dispatch.

Wires real registries (dependency + command) the way a composition root
does and drives the three reference flows:

1. A decorated sync handler for DoSomething("World")
2. A dependency-bound sync handler for AddNumbers(3, 5)
3. A dependency-bound async handler for AddNumbers(8, 4)

plus the same handlers bound first and decorated afterwards, which is the
only order that works: decorations take the single-argument bound handler.

The printer collaborator records into a list instead of writing to stdout
so ordering can be asserted.
"""

import asyncio
from dataclasses import dataclass
from typing import Protocol

import pytest

from courier.application.decorators import (
    decorate_around,
    decorate_around_async,
    decorate_before,
    decorate_before_async,
    decorate_scoped,
)
from courier.application.injection import bind_dependencies, bind_dependencies_async
from courier.core.container import get_command_registry, get_dependency_registry
from courier.core.errors import UnresolvedDependencyError


@dataclass(frozen=True, kw_only=True)
class DoSomething:
    name: str


@dataclass(frozen=True, kw_only=True)
class AddNumbers:
    a: int
    b: int


class Adder(Protocol):
    def __call__(self, a: int, b: int) -> int: ...


class Printer(Protocol):
    def __call__(self, value: object) -> None: ...


def add(a: int, b: int) -> int:
    return a + b


def add_numbers(command: AddNumbers, adder: Adder, printer: Printer) -> None:
    printer(adder(command.a, command.b))


async def add_numbers_async(command: AddNumbers, adder: Adder, printer: Printer) -> None:
    result = adder(command.a, command.b)
    await asyncio.to_thread(printer, result)


@pytest.fixture
def output():
    return []


@pytest.fixture
def wired(output):
    """Container registries with Adder and Printer registered."""
    dependencies = get_dependency_registry()
    dependencies.register(Adder, add)
    dependencies.register(Printer, output.append)
    return get_command_registry()


@pytest.mark.integration
class TestDecoratedDispatch:
    """Decorated sync handler flow."""

    def test_do_something_runs_audit_log_handler_audit(self, wired, output):
        """Test ordered side effects around the handler reading the command."""

        def handle_do_something(command: DoSomething) -> None:
            output.append(f"Method handle_do_something is called with {command.name}")

        handler = decorate_around(
            decorate_before(handle_do_something, lambda c: output.append("Doing logging")),
            lambda c: output.append("Starting audit"),
            lambda c: output.append("Ending audit"),
        )
        wired.register_sync(DoSomething, handler)

        wired.dispatch(DoSomething(name="World"))

        assert output == [
            "Starting audit",
            "Doing logging",
            "Method handle_do_something is called with World",
            "Ending audit",
        ]


@pytest.mark.integration
class TestDependencyInjectedDispatch:
    """Dependency-bound handler flows."""

    def test_sync_add_numbers_prints_sum(self, wired, output):
        """Test AddNumbers(3, 5) makes the printer receive 8."""
        wired.register_sync(AddNumbers, add_numbers, dependencies=(Adder, Printer))

        wired.dispatch(AddNumbers(a=3, b=5))

        assert output == [8]

    @pytest.mark.asyncio
    async def test_async_add_numbers_resolves_after_print(self, wired, output):
        """Test awaiting AddNumbers(8, 4) completes after printer got 12."""
        wired.register_async(
            AddNumbers, add_numbers_async, dependencies=(Adder, Printer)
        )

        await wired.dispatch_async(AddNumbers(a=8, b=4))

        assert output == [12]

    @pytest.mark.asyncio
    async def test_sync_and_async_registrations_coexist(self, wired, output):
        """Test one command type served by both stores independently."""
        wired.register_sync(AddNumbers, add_numbers, dependencies=(Adder, Printer))
        wired.register_async(
            AddNumbers, add_numbers_async, dependencies=(Adder, Printer)
        )

        wired.dispatch(AddNumbers(a=3, b=5))
        await wired.dispatch_async(AddNumbers(a=8, b=4))

        assert output == [8, 12]

    def test_inferred_dependencies_from_type_hints(self, wired, output):
        """Test binding via type hints matches explicit identities."""
        wired.register_sync(
            AddNumbers, bind_dependencies(add_numbers, get_dependency_registry())
        )

        wired.dispatch(AddNumbers(a=20, b=22))

        assert output == [42]

    def test_missing_collaborator_fails_before_dispatch(self):
        """Test registration against an empty dependency registry fails fast."""
        commands = get_command_registry()

        with pytest.raises(UnresolvedDependencyError):
            commands.register_sync(
                AddNumbers, add_numbers, dependencies=(Adder, Printer)
            )

        assert commands.has_handler(AddNumbers) is False

    def test_unregistered_command_is_noop(self, wired, output):
        """Test dispatching with nothing registered has no side effect."""
        wired.dispatch(DoSomething(name="World"))

        assert output == []


@pytest.mark.integration
class TestDecoratedDependencyInjectedDispatch:
    """Bound handlers wrapped in decorations, dispatched through the registry."""

    def test_bound_then_decorated_sync_handler(self, wired, output):
        """Test side effects wrap the handler and the printer sees the sum."""
        bound = bind_dependencies(add_numbers, get_dependency_registry(), Adder, Printer)
        handler = decorate_around(
            decorate_before(bound, lambda c: output.append(f"adding {c.a} and {c.b}")),
            lambda c: output.append("before"),
            lambda c: output.append("after"),
        )
        wired.register_sync(AddNumbers, handler)

        wired.dispatch(AddNumbers(a=3, b=5))

        assert output == ["before", "adding 3 and 5", 8, "after"]

    def test_scoped_after_runs_when_collaborator_fails(self, output):
        """Test release step still runs when an injected collaborator raises."""

        def broken_adder(a: int, b: int) -> int:
            raise ArithmeticError("adder offline")

        dependencies = get_dependency_registry()
        dependencies.register(Adder, broken_adder)
        dependencies.register(Printer, output.append)
        commands = get_command_registry()

        handler = decorate_scoped(
            bind_dependencies(add_numbers, dependencies),
            lambda c: output.append("acquire"),
            lambda c: output.append("release"),
        )
        commands.register_sync(AddNumbers, handler)

        with pytest.raises(ArithmeticError, match="adder offline"):
            commands.dispatch(AddNumbers(a=1, b=2))

        assert output == ["acquire", "release"]

    @pytest.mark.asyncio
    async def test_bound_then_decorated_async_handler(self, wired, output):
        """Test AddNumbers(8, 4) async flow wrapped in a before/after pair."""

        async def after(command: AddNumbers) -> None:
            await asyncio.sleep(0)
            output.append("after")

        bound = bind_dependencies_async(
            add_numbers_async, get_dependency_registry(), Adder, Printer
        )
        wired.register_async(
            AddNumbers,
            decorate_around_async(bound, lambda c: output.append("before"), after),
        )

        await wired.dispatch_async(AddNumbers(a=8, b=4))

        assert output == ["before", 12, "after"]

    @pytest.mark.asyncio
    async def test_registry_bound_async_handler_with_decorated_inner_step(
        self, wired, output
    ):
        """Test decorate_before_async on a bound handler registered with the registry."""
        bound = bind_dependencies_async(add_numbers_async, get_dependency_registry())
        wired.register_async(
            AddNumbers,
            decorate_before_async(bound, lambda c: output.append("Doing logging")),
        )

        await wired.dispatch_async(AddNumbers(a=20, b=22))

        assert output == ["Doing logging", 42]
