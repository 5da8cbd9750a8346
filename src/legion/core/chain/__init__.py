"""Parent chaining: ordered method implementations with explicit continuations."""

from legion.core.chain.core import chain_override, is_method
from legion.core.chain.models import PARENT_PARAMETER, MethodChain, Parent

__all__ = [
    "MethodChain",
    "Parent",
    "PARENT_PARAMETER",
    "chain_override",
    "is_method",
]
