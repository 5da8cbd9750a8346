"""Parent-chaining operations used when merging definitions into a Type."""

from __future__ import annotations

import inspect
from typing import Any

from legion.core.chain.models import MethodChain


def is_method(value: Any) -> bool:
    """Check whether a value takes part in parent chaining.

    Plain functions (including lambdas) and existing chains qualify. Classes,
    bound methods and other callables are treated as data.

    Args:
        value: Candidate member value.

    Returns:
        True if value is a plain function or a MethodChain.
    """
    return isinstance(value, MethodChain) or inspect.isfunction(value)


def chain_override(name: str, existing: Any, handler: Any) -> Any:
    """Merge ``handler`` over ``existing`` for the member ``name``.

    When both are method-valued the result is a chain whose most-derived
    implementation is ``handler`` (all of its handlers, if it is itself a
    chain). Otherwise ``handler`` simply replaces ``existing``.

    Args:
        name: Member name being merged.
        existing: Current value on the Type being extended (may be missing).
        handler: Value supplied by the definition.

    Returns:
        The value to store under ``name`` on the new Type.
    """
    if not (is_method(existing) and is_method(handler)):
        return handler

    chain = existing if isinstance(existing, MethodChain) else MethodChain(name, (existing,))
    if isinstance(handler, MethodChain):
        return chain.extended(*handler.handlers)
    return chain.extended(handler)
