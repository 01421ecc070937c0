# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

from __future__ import annotations

from dataclasses import dataclass
import inspect
import logging
from typing import Protocol, runtime_checkable

import pytest

from solidkit import (
    Dispatcher,
    UnsupportedCapabilityError,
    capabilities_of,
    capability,
    extract_capability_spec,
    require,
    satisfies,
)


@capability(description="Has a name.")
class Named(Protocol):
    def name(self) -> str: ...


@capability("greeting")
class Greeter(Named, Protocol):
    """Say hello."""

    def greet(self, who: str) -> str: ...


@dataclass(frozen=True)
class Person:
    first: str

    def name(self) -> str:
        return self.first

    def greet(self, who: str) -> str:
        return f"Hello {who}, I am {self.first}"


@runtime_checkable
class _UndecoratedNamed(Protocol):
    def name(self) -> str: ...


class Label:
    def name(self) -> str:
        return "label"


class Impostor:
    name = "not callable"


def test_capability_decorator_attaches_spec() -> None:
    spec = extract_capability_spec(Named)

    assert spec is not None
    assert spec.name == "Named"
    assert spec.operations == ("name",)
    assert spec.description == "Has a name."


def test_sub_capability_collects_parent_operations() -> None:
    spec = extract_capability_spec(Greeter)

    assert spec is not None
    assert spec.name == "greeting"
    assert spec.operations == ("name", "greet")
    assert spec.description == "Say hello."


def test_capability_is_runtime_checkable() -> None:
    assert isinstance(Person("Ada"), Greeter)
    assert not isinstance(Label(), Greeter)


def test_capability_adds_no_protocol_members() -> None:
    # Anything stored on the class would become a required member for isinstance.
    assert set(vars(Named)) == set(vars(_UndecoratedNamed))
    assert extract_capability_spec(_UndecoratedNamed) is None

    class Nameless:
        pass

    assert isinstance(Label(), Named)
    assert not isinstance(Nameless(), Named)


def test_capability_rejects_non_protocol() -> None:
    class Plain:
        def run(self) -> None: ...

    with pytest.raises(TypeError):
        capability()(Plain)


def test_capability_rejects_empty_protocol() -> None:
    class Empty(Protocol):
        pass

    with pytest.raises(ValueError, match="declares no operations"):
        capability()(Empty)


def test_extract_spec_missing_for_undecorated() -> None:
    class Loose(Protocol):
        def go(self) -> None: ...

    assert extract_capability_spec(Loose) is None
    # Undecorated protocols still work structurally.
    assert satisfies(object(), Loose) is False


def test_satisfies_is_structural() -> None:
    assert satisfies(Person("Ada"), Greeter)
    assert satisfies(Label(), Named)
    assert not satisfies(Label(), Greeter)
    assert not satisfies(Impostor(), Named)


def test_capabilities_of_preserves_argument_order() -> None:
    specs = capabilities_of(Person("Ada"), Greeter, Named)
    assert [spec.name for spec in specs] == ["greeting", "Named"]

    specs = capabilities_of(Label(), Greeter, Named)
    assert [spec.name for spec in specs] == ["Named"]


def test_require_returns_value_or_raises() -> None:
    person = Person("Ada")
    assert require(person, Greeter) is person

    with pytest.raises(UnsupportedCapabilityError) as excinfo:
        require(Label(), Greeter)

    assert excinfo.value.capability == "greeting"
    assert excinfo.value.missing == ("greet",)
    assert "greet" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)


def test_dispatcher_invokes_operation_with_arguments() -> None:
    greet = Dispatcher(Greeter, "greet")

    assert greet(Person("Ada"), "Bob") == "Hello Bob, I am Ada"
    assert greet(Person("Lin"), who="Sam") == "Hello Sam, I am Lin"
    assert greet.operation == "greet"
    assert greet.capability.name == "greeting"
    assert repr(greet) == "Dispatcher(greeting.greet)"


def test_dispatcher_accepts_variant_added_later() -> None:
    name = Dispatcher(Named, "name")

    class Robot:
        def name(self) -> str:
            return "R2"

    assert name(Label()) == "label"
    assert name(Robot()) == "R2"


def test_dispatcher_rejects_value_without_capability() -> None:
    greet = Dispatcher(Greeter, "greet")
    label = Label()

    with pytest.raises(UnsupportedCapabilityError):
        greet(label, "Bob")


def test_dispatcher_rejects_undeclared_operation() -> None:
    with pytest.raises(ValueError, match="no operation 'shout'"):
        Dispatcher(Greeter, "shout")


def test_dispatcher_never_inspects_concrete_type() -> None:
    source = inspect.getsource(Dispatcher)

    assert "isinstance" not in source
    assert "type(" not in source
    assert "__class__" not in source


def test_dispatcher_logs_each_dispatch(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="solidkit.capability")

    Dispatcher(Named, "name")(Label())

    records = [r for r in caplog.records if r.name == "solidkit.capability"]
    assert len(records) == 1
    assert records[0].getMessage() == "dispatch Named.name"
    assert records[0].context == {"capability": "Named", "operation": "name"}
