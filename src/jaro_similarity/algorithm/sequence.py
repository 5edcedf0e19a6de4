"""Input adapter: accept finite, indexable sequences and nothing else.

The matching scan indexes both inputs at arbitrary positions and needs
their lengths up front, so every public entry point funnels its arguments
through :func:`as_sequence` first.

- ``str`` is indexed by codepoint, so ``"香"`` and ``"ö"`` are one element each.
- Any ``collections.abc.Sequence`` (list, tuple, bytes, range, ...) is used as is.
- One-dimensional ``numpy.ndarray`` is used as is; higher ranks are rejected.
- Iterators, generators, sets, mappings, scalars and ``None`` are rejected
  with ``TypeError`` because they are either unordered or possibly unbounded.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

__all__ = ["as_sequence"]


def as_sequence(value: Any, name: str = "sequence") -> Sequence[Any] | np.ndarray:
    """Validate ``value`` as a finite, randomly-indexable sequence.

    Args:
        value: Candidate input.
        name:  Argument name used in error messages.

    Returns:
        ``value`` unchanged.

    Raises:
        TypeError:  ``value`` is not a sequence (e.g. a generator or a set).
        ValueError: ``value`` is a numpy array with more than one dimension.
    """
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            msg = f"{name} must be a one-dimensional array, got ndim={value.ndim}"
            raise ValueError(msg)
        return value
    if isinstance(value, Sequence):
        return value
    msg = (
        f"{name} must be a finite, indexable sequence (str, list, tuple, "
        f"1-D ndarray, ...), got {type(value).__name__}"
    )
    raise TypeError(msg)
