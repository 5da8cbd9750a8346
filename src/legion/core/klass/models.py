"""Extension models: definition shapes and diagnostics."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

Definition: TypeAlias = Mapping[str, Any]
"""Member name to value (data) or function (behavior), merged into a new Type."""

DefinitionSource: TypeAlias = Definition | type | Callable[[], Any]
"""Anything implement() accepts as one item: a definition, a class, or a zero-argument factory."""


class UnsafeMixinWarning(UserWarning):
    """A safe mixin skipped a function that would have replaced an existing method."""
