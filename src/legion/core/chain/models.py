"""Method chain models: ordered handler implementations and the parent continuation.

A method overridden across several Types is stored as one MethodChain holding
every implementation, base first. Invoking the chain runs the most-derived
handler; a handler that declares a ``parent`` parameter receives a Parent
continuation for the implementation it overrides.

Usage:
    def speak(self):
        return "base"

    def speak_child(self, parent):
        return "child-" + parent()

    chain = MethodChain("speak", (speak,)).extended(speak_child)
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

PARENT_PARAMETER = "parent"
"""Name of the parameter through which a handler receives its continuation."""

_PARENT_KINDS = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def _accepts_parent(handler: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return False
    param = signature.parameters.get(PARENT_PARAMETER)
    return param is not None and param.kind in _PARENT_KINDS


@dataclass(frozen=True, slots=True)
class MethodChain:
    """Ordered implementations of one method name, base first, most-derived last.

    Acts as a descriptor: looked up on an instance it yields a bound method,
    looked up on the class it yields the chain itself.
    """

    name: str
    handlers: tuple[Callable[..., Any], ...]
    _wants_parent: tuple[bool, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.handlers:
            raise ValueError(f"MethodChain {self.name!r} needs at least one handler")
        object.__setattr__(
            self, "_wants_parent", tuple(_accepts_parent(h) for h in self.handlers)
        )

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, instance: Any, *args: Any, **kwargs: Any) -> Any:
        return self.invoke(instance, len(self.handlers) - 1, args, kwargs)

    def invoke(
        self,
        instance: Any,
        depth: int,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        """Run the handler at ``depth`` on ``instance``.

        Args:
            instance: Object the handler runs against (its ``self``).
            depth: Index into handlers; 0 is the base implementation.
            args: Positional arguments from the caller.
            kwargs: Keyword arguments from the caller.

        Returns:
            Whatever the handler returns.
        """
        handler = self.handlers[depth]
        if depth > 0 and self._wants_parent[depth]:
            kwargs = {**kwargs, PARENT_PARAMETER: Parent(self, instance, depth - 1)}
        return handler(instance, *args, **kwargs)

    def extended(self, *handlers: Callable[..., Any]) -> MethodChain:
        """Return a new chain with ``handlers`` appended as the most-derived implementations."""
        return MethodChain(self.name, (*self.handlers, *handlers))

    @property
    def base(self) -> Callable[..., Any]:
        """The innermost implementation, called last when every override chains."""
        return self.handlers[0]

    @property
    def implementation(self) -> Callable[..., Any]:
        """The most-derived implementation."""
        return self.handlers[-1]

    def __len__(self) -> int:
        return len(self.handlers)


@dataclass(frozen=True, slots=True)
class Parent:
    """Continuation to the implementation an override replaced.

    Each call is independent; nothing is stored on the instance, so recursive
    calls and exceptions leave no state behind.
    """

    chain: MethodChain
    instance: Any
    depth: int

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.chain.invoke(self.instance, self.depth, args, kwargs)

    @property
    def implementation(self) -> Callable[..., Any]:
        """The handler this continuation will run."""
        return self.chain.handlers[self.depth]
