"""EqualityComparer Protocol for custom element equality.

Every scoring function accepts an optional ``comparer``.  When omitted,
elements are compared with their natural ``==``.  Any callable taking two
elements and returning a truthy value satisfies the protocol: plain
functions, lambdas, and ``operator.eq`` all pass ``isinstance`` checks.

Example::

    from jaro_similarity import jaro
    from jaro_similarity.protocols import EqualityComparer

    def casefold_eq(left: str, right: str) -> bool:
        return left.casefold() == right.casefold()

    assert isinstance(casefold_eq, EqualityComparer)  # True, structural conformance
    jaro("MARTHA", "marhta", comparer=casefold_eq)   # 0.944...
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EqualityComparer(Protocol):
    """Structural protocol for element equality callables.

    The callable must:
    - Accept one element from each input sequence (left first, right second).
    - Return ``True`` when the two elements should count as a match.
    - Be pure: no side effects, same answer for the same pair.
    """

    def __call__(self, left: Any, right: Any, /) -> bool: ...
