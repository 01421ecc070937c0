# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Capability declaration and dispatch.

A *capability* is a :class:`typing.Protocol` naming one or more operations.  A
*variant* is any class providing those operations.  A :class:`Dispatcher`
invokes one operation on any value that satisfies the capability, and it does
so without ever looking at the value's concrete class: the only questions it
asks are "does this value expose the declared operations?" and, after that,
"call it".

Adding a variant therefore never touches a dispatcher.  Static type checkers
reject a variant passed where a capability it does not implement is
expected; :func:`require` gives the same guarantee at runtime boundaries,
before any operation runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from .errors import UnsupportedCapabilityError
from .utils.logger import get_logger


P = TypeVar("P")

# Kept outside the protocol classes: on 3.10/3.11 every name in a protocol's
# ``__dict__`` becomes a member ``isinstance`` requires.
_CAPABILITIES: dict[type, CapabilitySpec] = {}


@dataclass(frozen=True, slots=True)
class CapabilitySpec:
    """Registered description of a capability protocol."""

    name: str
    protocol: type
    operations: tuple[str, ...]
    description: str = ""


def _is_protocol(cls: object) -> bool:
    # ``typing`` flags protocol classes with ``_is_protocol``; plain ABCs lack it.
    return isinstance(cls, type) and bool(getattr(cls, "_is_protocol", False))


def _protocol_operations(protocol: type) -> tuple[str, ...]:
    names: list[str] = []
    for klass in reversed(protocol.__mro__):
        if klass in (object, Protocol, Generic) or not _is_protocol(klass):
            continue
        for name, member in vars(klass).items():
            if name.startswith("_") or name in names:
                continue
            if callable(member) or isinstance(member, (staticmethod, classmethod)):
                names.append(name)
    return tuple(names)


def _build_spec(protocol: type, name: str | None, description: str | None) -> CapabilitySpec:
    if not _is_protocol(protocol):
        raise TypeError(f"{protocol!r} is not a typing.Protocol class")
    operations = _protocol_operations(protocol)
    if not operations:
        raise ValueError(f"Capability '{name or protocol.__name__}' declares no operations")
    desc = (description if description is not None else (protocol.__doc__ or "")).strip()
    return CapabilitySpec(
        name=name or protocol.__name__,
        protocol=protocol,
        operations=operations,
        description=desc,
    )


def capability(name: str | None = None, *, description: str | None = None) -> Callable[[type[P]], type[P]]:
    """Decorator that registers a protocol class as a capability.

    The protocol is made runtime-checkable and its :class:`CapabilitySpec`
    is registered.  Operation names are the protocol's public callable members,
    including those inherited from parent protocols.
    """

    def decorator(protocol: type[P]) -> type[P]:
        spec = _build_spec(protocol, name, description)
        checked = runtime_checkable(protocol)  # type: ignore[arg-type]
        _CAPABILITIES[checked] = spec
        return checked

    return decorator


def extract_capability_spec(protocol: type) -> CapabilitySpec | None:
    """Return the :class:`CapabilitySpec` attached to *protocol*, if present."""
    return _CAPABILITIES.get(protocol)


def _spec_for(protocol: type) -> CapabilitySpec:
    return extract_capability_spec(protocol) or _build_spec(protocol, None, None)


def _missing_operations(value: object, spec: CapabilitySpec) -> tuple[str, ...]:
    return tuple(op for op in spec.operations if not callable(getattr(value, op, None)))


def satisfies(value: object, protocol: type) -> bool:
    """Return whether *value* exposes every operation *protocol* declares."""
    return not _missing_operations(value, _spec_for(protocol))


def capabilities_of(value: object, *protocols: type) -> list[CapabilitySpec]:
    """Return the specs, in argument order, of the capabilities *value* satisfies."""
    specs = [_spec_for(protocol) for protocol in protocols]
    return [spec for spec in specs if not _missing_operations(value, spec)]


def require(value: P, protocol: type[P]) -> P:
    """Return *value* unchanged, or raise if it does not satisfy *protocol*.

    Raises:
        UnsupportedCapabilityError: listing the operations *value* lacks.
    """
    spec = _spec_for(protocol)
    missing = _missing_operations(value, spec)
    if missing:
        raise UnsupportedCapabilityError(spec.name, missing)
    return value


class Dispatcher(Generic[P]):
    """Invoke one capability operation on any value that satisfies it.

    Example::

        area = Dispatcher(Shape, "calculate_area")
        area(CircleShape(radius=5))  # 78.539...

    The dispatcher keeps only the capability and the operation name.  It is
    closed for modification: new variants of the capability work without any
    change here.
    """

    __slots__ = ("_spec", "_operation", "_log")

    def __init__(self, capability: type[P], operation: str, *, logger: logging.Logger | None = None) -> None:
        spec = _spec_for(capability)
        if operation not in spec.operations:
            raise ValueError(
                f"Capability '{spec.name}' has no operation '{operation}'; "
                f"declared: {', '.join(spec.operations)}"
            )
        self._spec = spec
        self._operation = operation
        self._log = logger or get_logger(__name__)

    @property
    def capability(self) -> CapabilitySpec:
        return self._spec

    @property
    def operation(self) -> str:
        return self._operation

    def __call__(self, value: P, /, *args: Any, **kwargs: Any) -> Any:
        require(value, self._spec.protocol)
        self._log.debug(
            "dispatch %s.%s",
            self._spec.name,
            self._operation,
            extra={"context": {"capability": self._spec.name, "operation": self._operation}},
        )
        return getattr(value, self._operation)(*args, **kwargs)

    def __repr__(self) -> str:
        return f"Dispatcher({self._spec.name}.{self._operation})"


__all__ = [
    "CapabilitySpec",
    "Dispatcher",
    "capabilities_of",
    "capability",
    "extract_capability_spec",
    "require",
    "satisfies",
]
